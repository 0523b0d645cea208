# encoding: utf-8
#
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Author: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_dots import to_data
from mo_logs import Log


def reverse(values):
    """
    REVERSE - WITH NO SIDE EFFECTS!

    :param values: ANY FINITE SEQUENCE (None IS THE EMPTY SEQUENCE)
    :return: NEW list, SAME ELEMENTS, OPPOSITE ORDER
    """
    if values is None:
        return []
    output = list(values)
    output.reverse()
    return output


def pop_last(values):
    """
    REMOVE THE LAST ELEMENT OF values AND RETURN IT
    RECORDS ARE WRAPPED SO FIELDS CAN BE READ AS ATTRIBUTES
    """
    if not values:
        Log.error("Expecting at least one value to pop")
    return to_data(values.pop())
