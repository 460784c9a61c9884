# This file is part of falsify.
#
# Copyright the falsify Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import pytest

from falsify import settings

from tests.common.setup import run

run()


@pytest.fixture(scope="function", autouse=True)
def _reset_settings_profile():
    settings.load_profile("default")
    yield
    settings.load_profile("default")
