# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#    Infura REST API client
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

import logging
from collections import namedtuple
from infuralib.config import config
from infuralib.services.baseclient import BaseClient, ClientError, ClientResult

_logger = logging.getLogger(__name__)

PROVIDERNAME = 'infura'

ClientConfig = namedtuple('ClientConfig', ['base_url', 'network', 'api_version', 'jsonrpc_version'])


class InfuraClient(BaseClient):
    """
    Client for the Infura REST API.

    Gives access to the JSON-RPC method descriptions, JSON-RPC calls, ticker symbols and the blacklist. All
    request methods return a :class:`ClientResult`, request failures are not raised but returned in the
    result's error attribute.

    >>> ic = InfuraClient('ropsten')
    >>> ic.construct_url('ticker/symbols')
    'https://api.infura.io/v1/ticker/symbols'
    """

    def __init__(self, network=None, base_url=None, api_version=None, jsonrpc_version=None, timeout=None):
        """
        Create an Infura REST client.

        :param network: Ethereum network: kovan, mainnet, rinkeby or ropsten. Default is DEFAULT_NETWORK from config
        :type network: str
        :param base_url: Url of the Infura API, default is https://api.infura.io
        :type base_url: str
        :param api_version: Infura API version used in urls, default is v1
        :type api_version: str
        :param jsonrpc_version: Version used in JSON-RPC request bodies, default is 2.0
        :type jsonrpc_version: str
        :param timeout: Default timeout in seconds for requests
        :type timeout: int, float
        """
        self.config = ClientConfig(
            base_url=base_url or config.INFURA_BASE_URL,
            network=network if network is not None else config.DEFAULT_NETWORK,
            api_version=api_version or config.API_VERSION,
            jsonrpc_version=jsonrpc_version or config.JSONRPC_VERSION,
        )
        if self.config.network not in config.NETWORKS:
            _logger.debug("Network %s is not a known Infura network, using it as is" % self.config.network)
        super(InfuraClient, self).__init__(PROVIDERNAME, self.config.base_url,
                                           timeout if timeout is not None else config.TIMEOUT_REQUESTS)

    def __repr__(self):
        return "<InfuraClient(network=%s, api_version=%s)>" % (self.config.network, self.config.api_version)

    @property
    def network(self):
        return self.config.network

    @property
    def networks(self):
        return dict(config.NETWORKS)

    @property
    def versions(self):
        return {'api': self.config.api_version, 'jsonrpc': self.config.jsonrpc_version}

    def construct_url(self, path, api_version=None):
        """
        Construct url to interact with the Infura API.

        >>> InfuraClient().construct_url('', api_version='v100')
        'https://api.infura.io/v100/'

        :param path: Suffix of url
        :type path: str
        :param api_version: Override Infura API version used in url
        :type api_version: str

        :return str: Constructed url
        """
        if api_version is None:
            api_version = self.config.api_version
        return "%s/%s/%s" % (self.config.base_url, api_version, path)

    def generic_get(self, url, timeout=None):
        """
        Make a GET request at url.

        :param url: Url to use in GET request
        :type url: str
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult: Decoded response body or error
        """
        try:
            return ClientResult(data=self.request(url, timeout=timeout))
        except ClientError as e:
            return ClientResult(error=e)

    def generic_post(self, url, request_body=None, timeout=None):
        """
        Make a POST request at url with JSON request body.

        :param url: Url to use in POST request
        :type url: str
        :param request_body: Dictionary to send as JSON request body
        :type request_body: dict
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult: Decoded response body or error
        """
        try:
            return ClientResult(data=self.request(url, 'post', post_data=request_body, timeout=timeout))
        except ClientError as e:
            return ClientResult(error=e)

    def get_client_methods(self, network=None, timeout=None):
        """
        Get list of supported JSON-RPC methods for a network.

        :param network: Override the default network of this client
        :type network: str
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult:
        """
        url = self.construct_url('jsonrpc/%s/methods' % (self.config.network if network is None else network))
        return self.generic_get(url, timeout=timeout)

    def get_client_method(self, method, network=None, timeout=None):
        """
        Get JSON-RPC method description, i.e. 'eth_blockNumber'.

        :param method: Name of method
        :type method: str
        :param network: Override the default network of this client
        :type network: str
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult:
        """
        url = self.construct_url('jsonrpc/%s/%s' % (self.config.network if network is None else network, method))
        return self.generic_get(url, timeout=timeout)

    def post_client_method(self, method, params=None, network=None, timeout=None):
        """
        Call a JSON-RPC method.

        :param method: Name of method
        :type method: str
        :param params: Ordered list of parameters for this method, default is an empty list
        :type params: list
        :param network: Override the default network of this client
        :type network: str
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult:
        """
        url = self.construct_url('jsonrpc/%s' % (self.config.network if network is None else network))
        return self.generic_post(url, self.jsonrpc_request(method, params), timeout=timeout)

    def jsonrpc_request(self, method, params=None):
        """
        Create JSON-RPC request body for method with ordered list of parameters

        >>> InfuraClient().jsonrpc_request('eth_blockNumber')
        {'id': 1, 'jsonrpc': '2.0', 'method': 'eth_blockNumber', 'params': []}

        :return dict:
        """
        if params is None:
            params = []
        return {
            'id': config.JSONRPC_REQUEST_ID,
            'jsonrpc': self.config.jsonrpc_version,
            'method': method,
            'params': params,
        }

    def get_ticker_symbols(self, timeout=None):
        url = self.construct_url('ticker/symbols')
        return self.generic_get(url, timeout=timeout)

    def get_ticker_symbol(self, symbol, timeout=None):
        """
        Get ticker information for a symbol, i.e. 'ethusd'

        :return ClientResult:
        """
        url = self.construct_url('ticker/%s' % symbol)
        return self.generic_get(url, timeout=timeout)

    def get_ticker_symbol_full(self, symbol, timeout=None):
        """
        Get full ticker information for a symbol, with prices per exchange

        :return ClientResult:
        """
        url = self.construct_url('ticker/%s/full' % symbol)
        return self.generic_get(url, timeout=timeout)

    def get_blacklist(self, api_version=None, timeout=None):
        """
        Get blacklist of phishing domains and addresses.

        :param api_version: Override Infura API version, default is BLACKLIST_API_VERSION (v2)
        :type api_version: str
        :param timeout: Override timeout in seconds
        :type timeout: int, float

        :return ClientResult:
        """
        if api_version is None:
            api_version = config.BLACKLIST_API_VERSION
        url = self.construct_url('blacklist', api_version=api_version)
        return self.generic_get(url, timeout=timeout)
