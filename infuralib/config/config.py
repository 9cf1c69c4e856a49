# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#    CONFIG - Configuration settings
#    © 2024 - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import os
import logging
import configparser
from pathlib import Path

# General defaults
LOGLEVEL = 'WARNING'

# File locations
INFURALIB_CONFIG_FILE = ''
INFURALIB_INSTALL_DIR = Path(__file__).parents[1]
INFURALIB_DATA_DIR = ''
INFURALIB_LOG_FILE = ''

# Main
ENABLE_INFURALIB_LOGGING = True

# Services
INFURA_BASE_URL = 'https://api.infura.io'
TIMEOUT_REQUESTS = 5

# Networks
NETWORKS = {
    'kovan': 'kovan',
    'mainnet': 'mainnet',
    'rinkeby': 'rinkeby',
    'ropsten': 'ropsten',
}
DEFAULT_NETWORK = 'mainnet'

# API and JSON-RPC versions
API_VERSION = 'v1'
BLACKLIST_API_VERSION = 'v2'
JSONRPC_VERSION = '2.0'
JSONRPC_REQUEST_ID = 1


def read_config():
    config = configparser.ConfigParser()

    def config_get(section, var, fallback, is_boolean=False):
        try:
            if is_boolean:
                val = config.getboolean(section, var, fallback=fallback)
            else:
                val = config.get(section, var, fallback=fallback)
            return val
        except Exception:
            return fallback

    global INFURALIB_INSTALL_DIR, INFURALIB_DATA_DIR, INFURALIB_CONFIG_FILE
    global INFURALIB_LOG_FILE, LOGLEVEL, ENABLE_INFURALIB_LOGGING
    global TIMEOUT_REQUESTS, DEFAULT_NETWORK, API_VERSION, BLACKLIST_API_VERSION, JSONRPC_VERSION

    # Read settings from configuration file provided in OS environment or ~/.infuralib/ directory
    config_file_name = os.environ.get('INFURALIB_CONFIG_FILE')
    if not config_file_name:
        INFURALIB_CONFIG_FILE = Path('~/.infuralib/config.ini').expanduser()
    else:
        INFURALIB_CONFIG_FILE = Path(config_file_name)
        if not INFURALIB_CONFIG_FILE.is_absolute():
            INFURALIB_CONFIG_FILE = Path(Path.home(), '.infuralib', INFURALIB_CONFIG_FILE)
        if not INFURALIB_CONFIG_FILE.exists():
            INFURALIB_CONFIG_FILE = Path(INFURALIB_INSTALL_DIR, 'data', config_file_name)
        if not INFURALIB_CONFIG_FILE.exists():
            raise IOError('InfuraLib configuration file not found: %s' % str(INFURALIB_CONFIG_FILE))
    data = config.read(str(INFURALIB_CONFIG_FILE))
    INFURALIB_DATA_DIR = Path(config_get('locations', 'data_dir', fallback='~/.infuralib')).expanduser()

    # Log settings
    ENABLE_INFURALIB_LOGGING = config_get("logs", "enable_infuralib_logging", fallback=True, is_boolean=True)
    INFURALIB_LOG_FILE = Path(INFURALIB_DATA_DIR, config_get('logs', 'log_file', fallback='infuralib.log'))
    if ENABLE_INFURALIB_LOGGING:
        INFURALIB_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    loglevel = config_get('logs', 'loglevel', fallback=LOGLEVEL).upper()
    if loglevel in logging._nameToLevel:
        LOGLEVEL = loglevel

    # Service settings
    try:
        TIMEOUT_REQUESTS = float(config_get('common', 'timeout_requests', fallback=TIMEOUT_REQUESTS))
    except ValueError:
        pass
    DEFAULT_NETWORK = config_get('common', 'default_network', fallback=DEFAULT_NETWORK)
    API_VERSION = config_get('common', 'api_version', fallback=API_VERSION)
    BLACKLIST_API_VERSION = config_get('common', 'blacklist_api_version', fallback=BLACKLIST_API_VERSION)
    JSONRPC_VERSION = config_get('common', 'jsonrpc_version', fallback=JSONRPC_VERSION)

    if not data:
        return False
    return True


# Initialize library
read_config()
INFURALIB_VERSION = Path(INFURALIB_INSTALL_DIR, 'config/VERSION').read_text().strip()
