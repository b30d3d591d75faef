########################################################################
# File name: props.py
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
:mod:`~xmppmsg.props` --- Descriptors (properties) for use with stanzas
#######################################################################

The descriptors in this module project XML attributes and child element
character data of the element wrapped by a :class:`~.StanzaBase` onto plain
Python attributes. Reads are lenient: malformed or missing values are
returned as the default of the descriptor. Writes are validated before the
element is touched, so a rejected write leaves the element unmodified.

Value types
===========

.. autoclass:: PropertyType

.. autoclass:: StringType

.. autoclass:: EnumType

Descriptors
===========

.. autoclass:: xmlattr

.. autoclass:: xmlchildtext

.. autoclass:: xmlchildattr

.. autoclass:: xmlchildflag

.. autoclass:: StanzaMeta

"""
import abc

from . import errors
from .utils import etree, normalize_tag, tag_to_str

__all__ = [
    "StringType",
    "EnumType",
    "xmlattr",
    "xmlchildtext",
    "xmlchildattr",
    "xmlchildflag",
]


class StanzaMeta(type):
    """
    Metaclass for stanza classes. After the class has been created, all
    :class:`xmlprop` descriptors in its namespace are told the name they
    have been assigned to and the class they live in.
    """

    def __new__(mcls, name, bases, namespace):
        cls = super().__new__(mcls, name, bases, namespace)
        for attr_name, obj in namespace.items():
            if isinstance(obj, xmlprop):
                obj._bind_to_class(cls, attr_name)
        return cls


class PropertyType:
    """
    .. attribute:: strict

       A boolean attribute dictating whether validation on reads is strict. The
       value of this is controlled by the value passed to the constructor.

    """

    def __init__(self, *, strict=False):
        self.strict = strict

    @abc.abstractmethod
    def _get(self, value, default):
        """
        The default implementation raises a :class:`ValueError` if the value is
        missing and returns :data:`None` otherwise.

        Subclasses must implement their validation in this method, except if
        they want to change the general behaviour of the descriptor (see
        :meth:`get`).
        """

        if value is None:
            raise ValueError("Value is not present")

    def get(self, value, default):
        """
        Validate the *value* against the type and return either the value or the
        default or raise a :class:`ValueError` exception (the latter is only
        allowed if :attr:`strict` has been set to :data:`True`).
        """
        try:
            return self._get(value, default)
        except ValueError:
            if self.strict:
                raise
            return default

    @abc.abstractmethod
    def set(self, value):
        """
        Validate the *value*. Return the actual string value which will be
        written to the data structure or raise a :class:`ValueError`.
        """

    def is_absent(self, value):
        """
        Return true if writing *value* means removing the attribute or child
        instead of writing it.
        """
        return value is None


class StringType(PropertyType):
    def _get(self, value, default):
        super()._get(value, default)
        return value

    def set(self, value):
        if not isinstance(value, str):
            raise ValueError("values must be strings, got {!r}".format(value))
        return value


class EnumType(PropertyType):
    """
    Restrict values to the members of the :class:`enum.Enum` subclass
    *enum_class*, whose values must be strings.

    Reading returns the enumeration member. Writing accepts members as well as
    their string values and raises :class:`~.errors.InvalidType` for anything
    else. The empty string counts as absent.
    """

    def __init__(self, enum_class, **kwargs):
        super().__init__(**kwargs)
        self.enum_class = enum_class

    def _check(self, value):
        if isinstance(value, self.enum_class):
            return value
        try:
            return self.enum_class(value)
        except ValueError:
            raise errors.InvalidType(
                value,
                [member.value for member in self.enum_class]
            ) from None

    def _get(self, value, default):
        super()._get(value, default)
        return self._check(value)

    def set(self, value):
        return self._check(value).value

    def is_absent(self, value):
        return value is None or value == ""


def _remove(parent, child):
    # keeps the tail text of removed children in the document
    if child.tail:
        prev = child.getprevious()
        if prev is not None:
            prev.tail = (prev.tail or "") + child.tail
        else:
            parent.text = (parent.text or "") + child.tail
    parent.remove(child)


class xmlprop:
    def __init__(self, *, default=None):
        self._default = default

    @property
    def default(self):
        return self._default

    def _bind_to_class(self, cls, name):
        """
        Called by the :class:`StanzaMeta` metaclass with the class and the
        *name* the descriptor was assigned to.
        """


class xmlattr(xmlprop):
    """
    An XML attribute of the stanza element.

    :param type_: The value type, defaults to :class:`StringType`.
    :param name: The attribute name. Defaults to the name the descriptor is
        assigned to, without trailing underscores.
    :param default: Value returned on reads if the attribute is missing or
        invalid.

    Assigning a value which is absent according to
    :meth:`PropertyType.is_absent` deletes the attribute.
    """

    def __init__(self, type_=None, *, name=None, **kwargs):
        super().__init__(**kwargs)
        self.name = name
        self.type_ = type_ or StringType()

    def _bind_to_class(self, cls, name):
        if self.name is None:
            self.name = name.rstrip("_")

    def __get__(self, instance, type_):
        if instance is None:
            return self

        try:
            return self.type_.get(instance.node.get(self.name), self._default)
        except ValueError as err:
            raise AttributeError(
                "XML attribute @{} value is invalid: {}".format(
                    self.name, err))

    def __set__(self, instance, value):
        if self.type_.is_absent(value):
            self.__delete__(instance)
            return
        instance.node.set(self.name, self.type_.set(value))

    def __delete__(self, instance):
        try:
            del instance.node.attrib[self.name]
        except KeyError:
            pass


class _childprop(xmlprop):
    def __init__(self, tag=None, **kwargs):
        super().__init__(**kwargs)
        # bare local names live in the namespace of the wrapped element
        self._stanza_ns = tag is None or (
            isinstance(tag, str) and not tag.startswith("{")
        )
        self._tag = None if tag is None else normalize_tag(tag)

    @property
    def tag(self):
        return self._tag

    def _bind_to_class(self, cls, name):
        if not self._stanza_ns:
            return
        localname = name.rstrip("_") if self._tag is None else self._tag[1]
        self._tag = (cls.TAG[0], localname)

    def _node_tag(self, node):
        if not self._stanza_ns:
            return tag_to_str(self._tag)
        return tag_to_str((etree.QName(node).namespace, self._tag[1]))

    def _find_all(self, node):
        return node.findall(self._node_tag(node))

    def _find(self, node):
        return node.find(self._node_tag(node))

    def _find_or_create(self, node):
        child = self._find(node)
        if child is None:
            child = etree.SubElement(node, self._node_tag(node))
        return child

    def _remove_all(self, node):
        for child in self._find_all(node):
            _remove(node, child)


class xmlchildtext(_childprop):
    """
    The character data of a child element of the stanza.

    :param tag: The tag of the child element. If a bare local name is given,
        the element lives in the namespace of the stanza. Defaults to the name
        the descriptor is assigned to.
    :param type_: The value type, defaults to :class:`StringType`.
    :param default: Value returned on reads if the child is missing.

    Reading returns the text of the first matching child (the empty string if
    the child has no text) or the default if there is no such child.

    Writing replaces the text of the child, creating the child if needed.
    Writing :data:`None` or the empty string removes the child. After any
    write there is at most one matching child.
    """

    def __init__(self, tag=None, *, type_=None, **kwargs):
        super().__init__(tag, **kwargs)
        self.type_ = type_ or StringType()

    def __get__(self, instance, type_):
        if instance is None:
            return self

        child = self._find(instance.node)
        if child is None:
            return self._default
        return self.type_.get(child.text or "", self._default)

    def __set__(self, instance, value):
        if self.type_.is_absent(value) or value == "":
            self.__delete__(instance)
            return

        text = self.type_.set(value)
        node = instance.node
        child, *duplicates = self._find_all(node) or [None]
        for duplicate in duplicates:
            _remove(node, duplicate)
        if child is None:
            child = etree.SubElement(node, self._node_tag(node))
        child.text = text

    def __delete__(self, instance):
        self._remove_all(instance.node)


class xmlchildattr(_childprop):
    """
    An XML attribute of a child element of the stanza.

    :param tag: The tag of the child element, as for :class:`xmlchildtext`.
    :param name: The name of the attribute on the child.
    :param type_: The value type, defaults to :class:`StringType`.
    :param writable: If false, the descriptor is read-only.

    Reading never creates the child; if the child or the attribute is missing,
    the default is returned. Writing creates the child if needed, writing
    :data:`None` or the empty string removes the attribute (but not the
    child).
    """

    def __init__(self, tag, name, *, type_=None, writable=False, **kwargs):
        super().__init__(tag, **kwargs)
        self.name = name
        self.type_ = type_ or StringType()
        self.writable = writable

    def __get__(self, instance, type_):
        if instance is None:
            return self

        child = self._find(instance.node)
        if child is None:
            return self._default
        return self.type_.get(child.get(self.name), self._default)

    def __set__(self, instance, value):
        if not self.writable:
            raise AttributeError("can't set attribute")
        if self.type_.is_absent(value) or value == "":
            child = self._find(instance.node)
            if child is not None:
                child.attrib.pop(self.name, None)
            return
        value = self.type_.set(value)
        self._find_or_create(instance.node).set(self.name, value)

    def __delete__(self, instance):
        self.__set__(instance, None)


class xmlchildflag(_childprop):
    """
    A boolean which is true if and only if a child element with the given
    *tag* exists.

    Writing a true value creates the (empty) child if it does not exist,
    writing a false value removes all matching children.
    """

    def __init__(self, tag, **kwargs):
        super().__init__(tag, default=False, **kwargs)

    def __get__(self, instance, type_):
        if instance is None:
            return self
        return self._find(instance.node) is not None

    def __set__(self, instance, value):
        if value:
            self._find_or_create(instance.node)
        else:
            self._remove_all(instance.node)

    def __delete__(self, instance):
        self._remove_all(instance.node)
