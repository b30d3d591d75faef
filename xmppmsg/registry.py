########################################################################
# File name: registry.py
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
:mod:`~xmppmsg.registry` --- Mapping payload elements to stanza classes
#######################################################################

A :class:`StanzaRegistry` maps the tags of payload (child) elements to the
stanza classes which know how to handle stanzas carrying such a payload. It is
consulted by :meth:`.Message.import_` to find the most specific class for an
incoming element.

Registries are plain objects; nothing is registered implicitly. Extension
modules provide a ``register(registry)`` function which is meant to be called
once at startup, for example::

    registry = xmppmsg.StanzaRegistry()
    xmppmsg.chatstates.register(registry)

    msg = xmppmsg.Message.import_(element, registry)

.. autoclass:: StanzaRegistry

"""
import logging
import types

from .utils import element_tag, normalize_tag, tag_to_str


logger = logging.getLogger(__name__)


class StanzaRegistry:
    """
    A mapping from ``(namespace_uri, localname)`` tags to stanza classes.

    .. automethod:: register

    .. automethod:: register_class

    .. automethod:: unregister

    .. automethod:: lookup

    .. automethod:: lookup_element

    .. automethod:: get_tag_map

    :class:`StanzaRegistry` objects support ``in`` (with tags in any format
    accepted by :func:`~.utils.normalize_tag`) and :func:`len`.
    """

    def __init__(self):
        self._tag_map = {}

    def register(self, tag, cls):
        """
        Register *cls* for payload elements with the given *tag*.

        Registering the same class for the same tag twice is a no-op.
        Registering a different class for an already registered tag raises
        :class:`ValueError`; :meth:`unregister` the old class first.
        """
        tag = normalize_tag(tag)
        try:
            existing = self._tag_map[tag]
        except KeyError:
            pass
        else:
            if existing is cls:
                return
            raise ValueError(
                "duplicate tag: {} is already handled by {}".format(
                    tag_to_str(tag),
                    existing.__qualname__,
                )
            )

        logger.debug("registering %s for %s",
                     cls.__qualname__, tag_to_str(tag))
        self._tag_map[tag] = cls

    def register_class(self, *tags):
        """
        Decorator which registers the decorated class for all *tags* and
        returns it unmodified::

            @registry.register_class((namespaces.xep0085, "active"))
            class ChatStateMessage(Message):
                ...
        """
        def decorator(cls):
            for tag in tags:
                self.register(tag, cls)
            return cls
        return decorator

    def unregister(self, tag):
        """
        Remove the registration for *tag*. Raise :class:`KeyError` if nothing
        is registered for *tag*.
        """
        tag = normalize_tag(tag)
        cls = self._tag_map.pop(tag)
        logger.debug("unregistered %s for %s",
                     cls.__qualname__, tag_to_str(tag))

    def lookup(self, tag):
        """
        Return the class registered for *tag* or :data:`None`.
        """
        return self._tag_map.get(normalize_tag(tag))

    def lookup_element(self, element):
        """
        Return the class registered for the tag of the lxml *element* or
        :data:`None`. Comments and processing instructions never match.
        """
        tag = element_tag(element)
        if tag is None:
            return None
        return self._tag_map.get(tag)

    def get_tag_map(self):
        """
        Return a read-only view of the mapping of tags to classes.
        """
        return types.MappingProxyType(self._tag_map)

    def __contains__(self, tag):
        return normalize_tag(tag) in self._tag_map

    def __len__(self):
        return len(self._tag_map)
