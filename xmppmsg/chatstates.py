########################################################################
# File name: chatstates.py
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
:mod:`~xmppmsg.chatstates` --- Chat State Notifications (:xep:`85`)
##################################################################

Messages carrying a chat state child are represented by
:class:`ChatStateMessage`. To have :meth:`.Message.import_` pick this class
for incoming messages, call :func:`register` on the registry::

    registry = xmppmsg.StanzaRegistry()
    xmppmsg.chatstates.register(registry)

.. autoclass:: ChatState

.. autoclass:: ChatStateMessage

.. autofunction:: register
"""
import enum

from . import props
from .stanza import Message
from .utils import etree, element_tag, namespaces, tag_to_str


namespaces.xep0085 = "http://jabber.org/protocol/chatstates"


class ChatState(enum.Enum):
    """
    Enumeration of the chat states defined by :xep:`0085`:

    .. attribute:: ACTIVE

    .. attribute:: COMPOSING

    .. attribute:: PAUSED

    .. attribute:: INACTIVE

    .. attribute:: GONE

    The values are the tags of the corresponding child elements.
    """
    ACTIVE = (namespaces.xep0085, "active")
    COMPOSING = (namespaces.xep0085, "composing")
    PAUSED = (namespaces.xep0085, "paused")
    INACTIVE = (namespaces.xep0085, "inactive")
    GONE = (namespaces.xep0085, "gone")


class ChatStateMessage(Message):
    """
    A :class:`~.Message` which carries a chat state notification.

    :param chat_state: The initial :attr:`chat_state`.

    All other arguments are passed to :class:`~.Message`.

    .. attribute:: chat_state

       The :class:`ChatState` of the message or :data:`None`. Assigning a
       state replaces any chat state child, assigning :data:`None` removes
       it.
    """

    def __init__(self, *args, chat_state=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.chat_state = chat_state

    def _state_children(self):
        for child in self.node:
            try:
                yield child, ChatState(element_tag(child))
            except ValueError:
                continue

    @property
    def chat_state(self):
        for _, state in self._state_children():
            return state
        return None

    @chat_state.setter
    def chat_state(self, value):
        if value is not None:
            value = ChatState(value)
        for child, _ in list(self._state_children()):
            props._remove(self.node, child)
        if value is not None:
            etree.SubElement(
                self.node,
                tag_to_str(value.value),
                nsmap={None: value.value[0]},
            )

    @chat_state.deleter
    def chat_state(self):
        self.chat_state = None


def register(registry):
    """
    Register :class:`ChatStateMessage` in *registry* for all chat state
    elements.
    """
    for state in ChatState:
        registry.register(state.value, ChatStateMessage)
