# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import pytest

from minicheck.core import is_minicheck_test
from minicheck.reporting import default as default_reporter
from minicheck.reporting import with_reporter

LOAD_PROFILE_OPTION = '--minicheck-profile'
VERBOSITY_OPTION = '--minicheck-verbosity'


class StoringReporter(object):

    def __init__(self, config):
        self.config = config
        self.results = []

    def __call__(self, msg):
        if self.config.getoption('capture', 'fd') == 'no':
            default_reporter(msg)
        if not isinstance(msg, str):
            msg = repr(msg)
        self.results.append(msg)


def pytest_addoption(parser):
    group = parser.getgroup('minicheck', 'minicheck')
    group.addoption(
        LOAD_PROFILE_OPTION,
        action='store',
        help='Load in a registered minicheck.settings profile'
    )
    group.addoption(
        VERBOSITY_OPTION,
        action='store',
        choices=['quiet', 'normal', 'verbose', 'debug'],
        help='Override the verbosity of minicheck reports'
    )


def pytest_configure(config):
    from minicheck import settings, Verbosity
    profile = config.getoption(LOAD_PROFILE_OPTION)
    if profile:
        settings.load_profile(profile)
    verbosity_name = config.getoption(VERBOSITY_OPTION)
    if verbosity_name:
        verbosity = Verbosity.by_name(verbosity_name)
        name = '%s-with-%s-verbosity' % (
            getattr(settings, '_current_profile', 'default'), verbosity_name)
        settings.register_profile(name, settings(verbosity=verbosity))
        settings.load_profile(name)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item):
    if not (hasattr(item, 'obj') and is_minicheck_test(item.obj)):
        yield
    else:
        store = StoringReporter(item.config)
        with with_reporter(store):
            yield
        if store.results:
            item.minicheck_report_information = list(store.results)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    report = (yield).get_result()
    if hasattr(item, 'minicheck_report_information'):
        report.sections.append((
            'minicheck',
            '\n'.join(item.minicheck_report_information)
        ))
