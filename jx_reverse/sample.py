# encoding: utf-8
#
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Author: Kyle Lahnakoski (kyle@lahnakoski.com)
#
import os

import mo_json_config
from mo_dots import Data, from_data
from mo_kwargs import override
from mo_logs import Log

from jx_reverse import pop_last, reverse

DEFAULT_OBJECTS = [{"name": "world"}, {"name": "hello"}]


@override
def run(objects=None, field="name", kwargs=None):
    """
    REVERSE objects, POP THE LAST ONE, AND RETURN ITS field

    :param objects: LIST OF RECORDS (default DEFAULT_OBJECTS)
    :param field: NAME OF THE FIELD TO READ OFF THE LAST RECORD
    :param kwargs: ALL SETTINGS
    """
    objects = from_data(objects)
    if objects is None:
        objects = DEFAULT_OBJECTS
    try:
        reversed_objects = reverse(objects)
        Log.note("reversed {{num}} objects", num=len(reversed_objects))
        last = pop_last(reversed_objects)
        value = from_data(last[field])
        Log.note("last object has {{field}}={{value|quote}}", field=field, value=value)
        return value
    except Exception as e:
        Log.error("Can not read {{field|quote}} from the reversed objects", field=field, cause=e)


def main(settings_file=None):
    """
    LOAD settings_file, SETUP LOGGING, THEN run() WITH THE SETTINGS
    """
    if settings_file:
        settings = mo_json_config.get("file://" + os.path.abspath(settings_file).replace(os.sep, "/"))
    else:
        settings = Data()

    if not settings.debug:
        return run(kwargs=settings)

    Log.start(settings.debug)
    try:
        return run(kwargs=settings)
    finally:
        Log.stop()
