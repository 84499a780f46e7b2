# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import pytest

from minicheck import settings
from minicheck.reporting import silent, with_reporter
from tests.common.setup import run

run()


@pytest.fixture(scope='function', autouse=True)
def reset_settings_profile():
    settings.load_profile('default')
    yield
    settings.load_profile('default')


@pytest.fixture(scope='function', autouse=True)
def quiet_reporter():
    """Keep passing checks from cluttering captured output. Tests that care
    about output install their own reporter with capture_out."""
    with with_reporter(silent):
        yield
