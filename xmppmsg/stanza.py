########################################################################
# File name: stanza.py
# This file is part of: xmppmsg
#
# LICENSE
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <http://www.gnu.org/licenses/>.
#
########################################################################
"""
:mod:`~xmppmsg.stanza` --- Typed views on stanza elements
#########################################################

This module provides classes which wrap an :mod:`lxml.etree` element and give
access to the RFC 6120/6121 defined parts of the stanza through typed
attributes. A stanza object does not copy any data: all reads and writes go
straight to the wrapped element, which is available as
:attr:`StanzaBase.node`.

Creating stanzas
================

Stanzas are either built from scratch::

    msg = Message("romeo@montague.example", "Art thou not Romeo?")

or by wrapping an element received from elsewhere. For messages,
:meth:`Message.import_` picks the most specific class registered in a
:class:`~.StanzaRegistry` for the payload of the message::

    msg = Message.import_(element, registry)

Top-level classes
=================

.. autoclass:: StanzaBase(*[, from_][, to][, id_])

.. currentmodule:: xmppmsg

.. autoclass:: Message([to][, body][, type_], *[, from_][, id_][, subject][, thread])

.. currentmodule:: xmppmsg.stanza

Module Level Constants
======================

.. autodata:: RANDOM_ID_BYTES
"""
import collections.abc
import logging
import random

from . import errors, props, structs

from .utils import element_tag, etree, namespaces, tag_to_str, to_nmtoken


logger = logging.getLogger(__name__)

#: The number of bytes of randomness used when generating stanza IDs.
RANDOM_ID_BYTES = 120 // 8


class StanzaBase(metaclass=props.StanzaMeta):
    """
    Base for all stanza classes. Subclasses must define :attr:`TAG`.

    .. attribute:: TAG

       The tag of the wrapped element as ``(namespace_uri, localname)``
       tuple.

    .. autoattribute:: node

    .. attribute:: from_

       The sender address as :class:`str` or :data:`None`.

    .. attribute:: to

       The recipient address as :class:`str` or :data:`None`.

    .. attribute:: id_

       The stanza ID as :class:`str` or :data:`None`.

    Addresses and IDs are passed through as-is; assigning :data:`None`
    removes the attribute.

    .. automethod:: from_node

    .. automethod:: autoset_id
    """

    TAG = None

    from_ = props.xmlattr()
    to = props.xmlattr()
    id_ = props.xmlattr()

    def __init__(self, *, from_=None, to=None, id_=None):
        super().__init__()
        namespace_uri = self.TAG[0]
        self._node = etree.Element(
            tag_to_str(self.TAG),
            nsmap={None: namespace_uri} if namespace_uri else None,
        )
        self.from_ = from_
        self.to = to
        self.id_ = id_

    @classmethod
    def from_node(cls, node):
        """
        Wrap the existing lxml element *node* without copying it.

        Only the local name of *node* is checked against :attr:`TAG`; the
        namespace is taken as-is, so elements in ``jabber:server`` or without
        namespace are accepted as well.

        :raises ~.errors.UnexpectedTag: if the local name of *node* is not the
            one of :attr:`TAG`.
        """
        tag = element_tag(node)
        if tag is None or tag[1] != cls.TAG[1]:
            raise errors.UnexpectedTag(tag or (None, repr(node)), cls.TAG)
        obj = cls.__new__(cls)
        obj._node = node
        return obj

    @property
    def node(self):
        """
        The wrapped :class:`lxml.etree._Element`.
        """
        return self._node

    def autoset_id(self):
        """
        If the :attr:`id_` already has a non-false (false is also the empty
        string!) value, this method is a no-op.

        Otherwise, the :attr:`id_` attribute is filled with
        :data:`RANDOM_ID_BYTES` of random data, encoded by
        :func:`xmppmsg.utils.to_nmtoken`.
        """
        if self.id_:
            return

        self.id_ = to_nmtoken(random.getrandbits(8*RANDOM_ID_BYTES))

    def __repr__(self):
        return "<{} from={!r} to={!r} id={!r}>".format(
            self.TAG[1],
            self.from_,
            self.to,
            self.id_,
        )


class Message(StanzaBase):
    """
    An XMPP message stanza.

    :param to: Recipient address.
    :param body: Text of the message.
    :param type_: The message type, as :class:`~.MessageType` member or its
        string value.
    :raises ~.errors.InvalidType: if *type_* is not a valid message type.

    The attributes are initialized in the order :attr:`to`, :attr:`type_`,
    :attr:`body`, then the keyword-only arguments.

    .. attribute:: type_

       The ``type`` attribute of the stanza as :class:`~.MessageType` member.

       Strings equal to the values of the enumeration are accepted on
       assignment. Any other value raises :class:`~.errors.InvalidType`, and
       the stanza keeps its previous type. Assigning :data:`None` or the empty
       string removes the attribute.

       If the attribute is missing or holds an unknown value, reads return
       :attr:`~.MessageType.CHAT`, the default type of messages created by
       this class.

    .. attribute:: body

       The text of the ``body`` child or :data:`None` if there is none.

    .. attribute:: subject

       The text of the ``subject`` child or :data:`None` if there is none.

    Writing :data:`None` or the empty string to :attr:`body` or
    :attr:`subject` removes the child element. Writing any other string
    replaces the existing text or creates the child.

    .. autoattribute:: thread

    .. attribute:: parent_thread

       The ``parent`` attribute of the ``thread`` child, or :data:`None` if
       the message has no thread or the thread no parent. Read-only; use a
       mapping with :attr:`thread` to set it.

    The type can be tested with the following predicates:

    .. autoattribute:: is_chat

    .. autoattribute:: is_error

    .. autoattribute:: is_groupchat

    .. autoattribute:: is_headline

    .. autoattribute:: is_normal

    .. automethod:: import_

    .. automethod:: make_reply
    """

    TAG = (namespaces.client, "message")

    type_ = props.xmlattr(
        props.EnumType(structs.MessageType),
        default=structs.MessageType.CHAT,
    )

    body = props.xmlchildtext()
    subject = props.xmlchildtext()

    _thread = props.xmlchildtext("thread")
    _thread_parent = props.xmlchildattr("thread", "parent", writable=True)
    parent_thread = props.xmlchildattr("thread", "parent")

    def __init__(self, to=None, body=None, type_=structs.MessageType.CHAT, *,
                 from_=None, id_=None, subject=None, thread=None):
        super().__init__(from_=from_, to=to, id_=id_)
        self.type_ = type_
        self.body = body
        self.subject = subject
        self.thread = thread

    @classmethod
    def import_(cls, node, registry=None):
        """
        Create a stanza object for the existing message element *node*.

        The children of *node* are looked up in *registry* (a
        :class:`~.StanzaRegistry`) in document order. The first child for
        which a class is registered decides: if that class is not *cls*,
        the import is delegated to its :meth:`import_`. Children after the
        first registered one are not considered, even if they are registered
        to another class.

        If no child is registered (or *registry* is :data:`None`), *node* is
        wrapped by *cls* directly, without copying.

        :raises ~.errors.UnexpectedTag: if *node* is not a message element.
        """
        klass = None
        if registry is not None:
            for child in node:
                klass = registry.lookup_element(child)
                if klass is not None:
                    break

        if klass is not None and klass is not cls:
            logger.debug("delegating import of %s to %s (payload %s)",
                         cls.__qualname__,
                         klass.__qualname__,
                         child.tag)
            return klass.import_(node, registry)

        return cls.from_node(node)

    @property
    def thread(self):
        """
        The conversation thread identifier (the text of the ``thread`` child)
        or :data:`None`.

        Assigning a string sets the identifier and keeps an existing
        :attr:`parent_thread`. Assigning a mapping with exactly one entry
        ``{parent: thread}`` sets both the identifier and the parent (a
        :data:`None` or empty parent removes it)::

            msg.thread = {"parent-id": "thread-id"}
            assert msg.thread == "thread-id"
            assert msg.parent_thread == "parent-id"

        Assigning :data:`None` or deleting the attribute removes the
        ``thread`` child including its parent.
        """
        return self._thread

    @thread.setter
    def thread(self, value):
        if not isinstance(value, collections.abc.Mapping):
            self._thread = value
            return

        if len(value) != 1:
            raise ValueError(
                "thread mapping must have exactly one entry, got {}".format(
                    len(value)
                )
            )
        (parent, value), = value.items()
        if not isinstance(value, str) or not value:
            raise ValueError("thread identifier must be a non-empty string")
        if parent is not None and not isinstance(parent, str):
            raise ValueError("parent thread identifier must be a string")

        self._thread = value
        self._thread_parent = parent

    @thread.deleter
    def thread(self):
        del self._thread

    @property
    def is_chat(self):
        """
        True if the :attr:`type_` is :attr:`~.MessageType.CHAT`.
        """
        return self.type_ == structs.MessageType.CHAT

    @property
    def is_error(self):
        """
        True if the :attr:`type_` is :attr:`~.MessageType.ERROR`.
        """
        return self.type_ == structs.MessageType.ERROR

    @property
    def is_groupchat(self):
        """
        True if the :attr:`type_` is :attr:`~.MessageType.GROUPCHAT`.
        """
        return self.type_ == structs.MessageType.GROUPCHAT

    @property
    def is_headline(self):
        """
        True if the :attr:`type_` is :attr:`~.MessageType.HEADLINE`.
        """
        return self.type_ == structs.MessageType.HEADLINE

    @property
    def is_normal(self):
        """
        True if the :attr:`type_` is :attr:`~.MessageType.NORMAL`.
        """
        return self.type_ == structs.MessageType.NORMAL

    def make_reply(self):
        """
        Create a reply for the message. The :attr:`id_` attribute is left
        unset in the reply. The :attr:`from_` and :attr:`to` are swapped, and
        the :attr:`type_` and :attr:`thread` (with its parent) are the same as
        in the original message.

        The new message has the class of the original and no body.
        """
        obj = type(self)(type_=self.type_)
        obj.from_ = self.to
        obj.to = self.from_
        if self.thread:
            obj.thread = {self.parent_thread: self.thread}
        return obj

    def __repr__(self):
        return "<message from={!r} to={!r} id={!r} type={}>".format(
            self.from_,
            self.to,
            self.id_,
            self.type_,
        )
