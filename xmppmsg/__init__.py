########################################################################
# File name: __init__.py
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
Version information
###################

There are two ways to obtain the imported version of the :mod:`xmppmsg`
package:

.. autodata:: __version__

.. data:: version

   Alias of :data:`__version__`.

.. autodata:: version_info

Overview
########

:mod:`xmppmsg` provides typed views on XMPP message stanzas held as
:mod:`lxml.etree` elements. The most important names are re-exported here:

.. autosummary::
    :nosignatures:

    xmppmsg.Message
    xmppmsg.MessageType
    xmppmsg.StanzaRegistry
    xmppmsg.InvalidType

Extensions
==========

* :mod:`xmppmsg.chatstates` (:xep:`85`)
* :mod:`xmppmsg.receipts` (:xep:`184`)

.. autofunction:: make_default_registry

"""
from ._version import version_info, __version__, version  # NOQA: F401

#: The imported :mod:`xmppmsg` version as a tuple.
#:
#: The components of the tuple are, in order: `major version`, `minor version`,
#: `patch level`, and `pre-release identifier`.
version_info = version_info

#: The imported :mod:`xmppmsg` version as a string.
__version__ = __version__

from .errors import InvalidType, StanzaError, UnexpectedTag  # NOQA: F401
from .registry import StanzaRegistry  # NOQA: F401
from .stanza import Message, StanzaBase  # NOQA: F401
from .structs import MessageType  # NOQA: F401

from . import chatstates, receipts  # NOQA: F401


def make_default_registry():
    """
    Return a new :class:`~.StanzaRegistry` with all extensions shipped with
    xmppmsg registered (:mod:`~xmppmsg.chatstates` and
    :mod:`~xmppmsg.receipts`).
    """
    registry = StanzaRegistry()
    chatstates.register(registry)
    receipts.register(registry)
    return registry
