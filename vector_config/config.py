"""
Design (config.py)
- Purpose: Centralize constants for the SDK configuration file layout.
- Inputs: None.
- Outputs: Constants (directory/file names, INI keys, encodings).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

# Default location: <home>/.anki_vector/sdk_config.ini (path resolved in storage module)
SDK_CONFIG_DIRNAME = ".anki_vector"
SDK_CONFIG_FILENAME = "sdk_config.ini"

# Recognized keys inside a [<serial number>] section
GUID_KEY = "guid"
NAME_KEY = "name"
IP_KEY = "ip"
CERT_KEY = "cert"
REMOTE_KEY = "remote"

# Certificates live beside the config file as <RobotName>-<serial>.cert
CERT_SUFFIX = ".cert"

FILE_ENCODING = "utf-8"

# configparser folds a [DEFAULT] section into every other section; this name never
# appears in a real file, so [DEFAULT] is kept as an ordinary section instead
UNUSED_DEFAULT_SECTION = "\x00vector-config-no-default"
