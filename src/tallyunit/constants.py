"""Constants for the tallyunit framework."""

# Version components. VERSION packs them as M*1000000 + N*1000 + P so it can
# be compared as a single integer.
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
VERSION = VERSION_MAJOR * 1_000_000 + VERSION_MINOR * 1_000 + VERSION_PATCH
VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Display names are bounded; longer names are truncated at registration
MAX_NAME_LENGTH = 255

# Hook name prefixes, matching the role a hook was registered under
BEFORE_PREFIX = "Before: "
BEFORE_CLASS_PREFIX = "BeforeClass: "
AFTER_PREFIX = "After: "
AFTER_CLASS_PREFIX = "AfterClass: "

# Report banners (16 columns wide)
FIXTURE_RULE = "[--------------]"
SUMMARY_RULE = "[==============]"
SUMMARY_TITLE = "[ TEST RESULTS ]"
RUN_TAG = "[ RUN          ]"
PASSED_TAG = "[       PASSED ]"
FAILED_TAG = "[       FAILED ]"
NOTE_TAG = "[              ]"
TOTAL_PASSED_TAG = "[    PASSED    ]"
TOTAL_FAILED_TAG = "[    FAILED    ]"
TOTAL_ERRORS_TAG = "[    ERRORS    ]"

# Environment variables
VERBOSITY_ENV = "TALLYUNIT_VERBOSITY"
OUTPUT_DIR_ENV = "TALLYUNIT_OUTPUT_DIR"

# Settings file looked up in the working directory before the user config dir
SETTINGS_FILENAME = "tallyunit.yaml"
RESULT_FILENAME = "run_result.json"

# Exit code used by the CLI for configuration / loading problems
USAGE_ERROR_EXIT_CODE = 2
# Largest exit status the operating system preserves
MAX_EXIT_CODE = 255
