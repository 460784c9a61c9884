# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""
The pytest plugin for falsify.

This lives outside the ``falsify`` package so that pytest can load it
without importing falsify; nothing here touches the library until a test
run actually asks for it.
"""

import sys

import pytest

LOAD_PROFILE_OPTION = "--falsify-profile"
VERBOSITY_OPTION = "--falsify-verbosity"

_VERBOSITY_NAMES = ["quiet", "normal", "verbose", "debug"]
_ALL_OPTIONS = [LOAD_PROFILE_OPTION, VERBOSITY_OPTION]


class StoringReporter:
    def __init__(self, config):
        assert "falsify" in sys.modules
        from falsify.reporting import default

        self.report = default
        self.config = config
        self.results = []

    def __call__(self, msg):
        if self.config.getoption("capture", "fd") == "no":
            self.report(msg)
        if not isinstance(msg, str):
            msg = repr(msg)
        self.results.append(msg)


def pytest_addoption(parser):
    group = parser.getgroup("falsify", "falsify")
    group.addoption(
        LOAD_PROFILE_OPTION,
        action="store",
        help="Load in a registered falsify.settings profile",
    )
    group.addoption(
        VERBOSITY_OPTION,
        action="store",
        choices=_VERBOSITY_NAMES,
        help="Override profile with verbosity setting specified",
    )


def _any_falsify_option(config):
    return bool(any(config.getoption(opt) for opt in _ALL_OPTIONS))


def pytest_report_header(config):
    if not (
        config.option.verbose >= 1
        or "falsify" in sys.modules
        or _any_falsify_option(config)
    ):
        return None

    from falsify import Verbosity, settings

    if config.option.verbose < 1 and settings.default.verbosity < Verbosity.verbose:
        return None
    settings_str = settings.default.show_changed()
    if settings_str != "":
        settings_str = f" -> {settings_str}"
    return f"falsify profile {settings._current_profile!r}{settings_str}"


def pytest_configure(config):
    config.addinivalue_line("markers", "falsify: Tests which use falsify.")
    if not _any_falsify_option(config):
        return
    from falsify import Verbosity, settings

    profile = config.getoption(LOAD_PROFILE_OPTION)
    if profile:
        settings.load_profile(profile)
    verbosity_name = config.getoption(VERBOSITY_OPTION)
    if verbosity_name and verbosity_name != settings.default.verbosity.name:
        verbosity_value = Verbosity[verbosity_name]
        name = f"{settings._current_profile}-with-{verbosity_name}-verbosity"
        # register_profile creates a new profile, exactly like the current one,
        # with the extra values given (in this case 'verbosity')
        settings.register_profile(name, verbosity=verbosity_value)
        settings.load_profile(name)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item):
    __tracebackhide__ = True
    if not (hasattr(item, "obj") and "falsify" in sys.modules):
        yield
        return

    from falsify.reporting import with_reporter

    store = StoringReporter(item.config)
    with with_reporter(store):
        yield
    if store.results:
        item.falsify_report_information = list(store.results)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    report = (yield).get_result()
    if hasattr(item, "falsify_report_information"):
        report.sections.append(("falsify", "\n".join(item.falsify_report_information)))