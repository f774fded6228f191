import os

from wideint.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['WIDEINT_CONFIG_YAML'] = os.environ.get('WIDEINT_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
