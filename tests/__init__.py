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
from mo_dots import Data
from mo_logs import Log

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

global_settings = Data()


def resource(filename):
    return os.path.join(TESTS_DIR, "resources", filename)


def _file_url(filename):
    return "file://" + os.path.abspath(filename).replace(os.sep, "/")


# read_alternate_settings
try:
    filename = os.environ.get("TEST_CONFIG")
    if not filename:
        filename = os.path.join(TESTS_DIR, "config", "default.json")
    global_settings = mo_json_config.get(_file_url(filename))
    Log.start(global_settings.debug)
except Exception as e:
    Log.warning("problem reading test settings", cause=e)
