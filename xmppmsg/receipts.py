########################################################################
# File name: receipts.py
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
:mod:`~xmppmsg.receipts` --- Message Delivery Receipts (:xep:`184`)
##################################################################

:class:`ReceiptMessage` gives access to the receipt request flag and the
acknowledgement of received messages. Use :func:`register` to have
:meth:`.Message.import_` produce it for incoming messages::

    registry = xmppmsg.StanzaRegistry()
    xmppmsg.receipts.register(registry)

Replying to a receipt request::

    msg = Message.import_(element, registry)
    if isinstance(msg, ReceiptMessage) and msg.request_receipt:
        send(msg.make_receipt())

.. autoclass:: ReceiptMessage

.. autofunction:: register
"""
from . import props

from .stanza import Message
from .utils import namespaces


namespaces.xep0184_receipts = "urn:xmpp:receipts"

REQUEST_TAG = (namespaces.xep0184_receipts, "request")
RECEIVED_TAG = (namespaces.xep0184_receipts, "received")


class ReceiptMessage(Message):
    """
    A :class:`~.Message` which requests or acknowledges delivery.

    :param request_receipt: Initial value of :attr:`request_receipt`.
    :param received_id: Initial value of :attr:`received_id`.

    All other arguments are passed to :class:`~.Message`.

    .. attribute:: request_receipt

       Boolean; true if the message carries a ``request`` child.

    .. autoattribute:: received_id

    .. automethod:: make_receipt
    """

    request_receipt = props.xmlchildflag(REQUEST_TAG)

    _received = props.xmlchildflag(RECEIVED_TAG)
    _received_id = props.xmlchildattr(RECEIVED_TAG, "id", writable=True)

    def __init__(self, *args, request_receipt=False, received_id=None,
                 **kwargs):
        super().__init__(*args, **kwargs)
        self.request_receipt = request_receipt
        self.received_id = received_id

    @property
    def received_id(self):
        """
        The ID of the acknowledged message (the ``id`` of the ``received``
        child) or :data:`None`. Assigning :data:`None` or the empty string
        removes the ``received`` child.
        """
        return self._received_id

    @received_id.setter
    def received_id(self, value):
        if value is None or value == "":
            self._received = False
        else:
            self._received_id = value

    def make_receipt(self):
        """
        Create the receipt acknowledging this message: the new message is
        addressed to the sender of this message, has the same type and thread
        and its :attr:`received_id` is the :attr:`id_` of this message.

        :raises ValueError: if this message does not request a receipt or
            has no ID.
        """
        if not self.request_receipt:
            raise ValueError("message does not request a receipt")
        if not self.id_:
            raise ValueError("cannot acknowledge message without id")

        obj = self.make_reply()
        obj.received_id = self.id_
        return obj


def register(registry):
    """
    Register :class:`ReceiptMessage` in *registry* for receipt requests and
    acknowledgements.
    """
    registry.register(REQUEST_TAG, ReceiptMessage)
    registry.register(RECEIVED_TAG, ReceiptMessage)
