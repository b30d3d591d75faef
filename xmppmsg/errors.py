########################################################################
# File name: errors.py
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
:mod:`~xmppmsg.errors` --- Exception classes
############################################

.. autoclass:: StanzaError

.. autoclass:: InvalidType

.. autoclass:: UnexpectedTag

"""

from .utils import tag_to_str


class StanzaError(Exception):
    """
    Base class for exceptions raised by xmppmsg when a stanza cannot be
    built, wrapped or modified.
    """


class InvalidType(StanzaError, ValueError):
    """
    A value outside the closed set of valid types has been assigned to a
    stanza type attribute. The stanza is left unmodified.

    .. attribute:: value

       The rejected value, as it was passed.

    .. attribute:: valid_types

       Tuple of the valid type strings.
    """

    def __init__(self, value, valid_types):
        self.value = value
        self.valid_types = tuple(valid_types)
        super().__init__(
            "invalid type ({!r}), use: {}".format(
                value,
                " ".join(self.valid_types),
            )
        )


class UnexpectedTag(StanzaError, ValueError):
    """
    An element has been given to a stanza class whose :attr:`TAG` does not
    match the tag of the element.

    .. attribute:: tag

       The offending tag as ``(namespace_uri, localname)`` tuple.

    .. attribute:: expected

       The tag which was expected.
    """

    def __init__(self, tag, expected):
        self.tag = tag
        self.expected = expected
        super().__init__(
            "unexpected element {}, expected {}".format(
                tag_to_str(tag),
                tag_to_str(expected),
            )
        )
