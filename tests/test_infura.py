# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#    Unit Tests for Infura client
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

import unittest
from unittest import mock

import requests

from infuralib.config import config
from infuralib.services.baseclient import ClientError, ClientResult
from infuralib.services.infura import InfuraClient, ClientConfig

BASE_URL = 'https://api.infura.io'


def mock_response(text='"test"', status_code=200):
    resp = mock.Mock()
    resp.text = text
    resp.status_code = status_code
    return resp


class TestInfuraClientConfig(unittest.TestCase):

    def test_infura_client_defaults(self):
        ic = InfuraClient()
        self.assertEqual(ic.config, ClientConfig(BASE_URL, config.DEFAULT_NETWORK, config.API_VERSION,
                                                 config.JSONRPC_VERSION))
        self.assertEqual(ic.network, config.DEFAULT_NETWORK)
        self.assertEqual(ic.timeout, config.TIMEOUT_REQUESTS)

    def test_infura_client_networks(self):
        self.assertEqual(sorted(InfuraClient().networks), ['kovan', 'mainnet', 'rinkeby', 'ropsten'])

    def test_infura_client_versions(self):
        ic = InfuraClient(api_version='v3', jsonrpc_version='1.0')
        self.assertEqual(ic.versions, {'api': 'v3', 'jsonrpc': '1.0'})

    def test_infura_client_unknown_network(self):
        ic = InfuraClient('goerli')
        self.assertEqual(ic.network, 'goerli')
        self.assertEqual(ic.construct_url('jsonrpc/%s' % ic.network), BASE_URL + '/v1/jsonrpc/goerli')

    def test_infura_client_config_immutable(self):
        ic = InfuraClient()
        self.assertRaises(AttributeError, setattr, ic.config, 'network', 'kovan')

    def test_infura_client_repr(self):
        self.assertEqual(repr(InfuraClient('kovan')), "<InfuraClient(network=kovan, api_version=v1)>")


class TestInfuraClientConstructUrl(unittest.TestCase):

    def setUp(self):
        self.ic = InfuraClient()

    def test_construct_url_default_version(self):
        self.assertEqual(self.ic.construct_url('a/path'), BASE_URL + '/v1/a/path')

    def test_construct_url_override_version(self):
        self.assertEqual(self.ic.construct_url('', api_version='v100'), BASE_URL + '/v100/')

    def test_construct_url_no_normalization(self):
        self.assertEqual(self.ic.construct_url('/ticker//x?y=1', 'v2'), BASE_URL + '/v2//ticker//x?y=1')

    def test_construct_url_client_api_version(self):
        ic = InfuraClient(api_version='v9', base_url='http://localhost:8080')
        self.assertEqual(ic.construct_url('ticker/symbols'), 'http://localhost:8080/v9/ticker/symbols')


class TestInfuraClientGeneric(unittest.TestCase):

    def setUp(self):
        self.ic = InfuraClient()

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_url(self, mock_get):
        mock_get.return_value = mock_response()
        self.ic.generic_get('http://url')
        self.assertEqual(mock_get.call_count, 1)
        self.assertEqual(mock_get.call_args[0][0], 'http://url')
        self.assertEqual(mock_get.call_args[1]['timeout'], self.ic.timeout)

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_data(self, mock_get):
        mock_get.return_value = mock_response('"test"')
        res = self.ic.generic_get('http://url')
        self.assertTrue(res.ok)
        self.assertEqual(res.data, 'test')
        self.assertIsNone(res.error)

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_json(self, mock_get):
        mock_get.return_value = mock_response('{"symbols": ["ethusd", "ethbtc"]}')
        self.assertEqual(self.ic.generic_get('http://url').unwrap(), {'symbols': ['ethusd', 'ethbtc']})

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError('test')
        res = self.ic.generic_get('http://url')
        self.assertFalse(res.ok)
        self.assertIsInstance(res.error, ClientError)
        self.assertIn('test', str(res.error))
        self.assertEqual(res.error.url, 'http://url')
        self.assertIsInstance(res.error.__cause__, requests.exceptions.ConnectionError)

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout('read timed out')
        res = self.ic.generic_get('http://url', timeout=0.5)
        self.assertFalse(res.ok)
        self.assertIn('Timeout after 0.5 seconds', str(res.error))
        self.assertEqual(mock_get.call_args[1]['timeout'], 0.5)
        self.assertIsInstance(res.error.__cause__, requests.exceptions.Timeout)

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_http_error(self, mock_get):
        mock_get.return_value = mock_response('{"error": "not found"}', 404)
        res = self.ic.generic_get('http://url')
        self.assertFalse(res.ok)
        self.assertEqual(res.error.status_code, 404)
        self.assertRaisesRegex(ClientError, 'response \\[404\\]', res.unwrap)

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_rate_limited(self, mock_get):
        mock_get.return_value = mock_response('Too many requests', 429)
        res = self.ic.generic_get('http://url')
        self.assertEqual(res.error.status_code, 429)
        self.assertIn('Maximum number of requests reached', str(res.error))

    @mock.patch('infuralib.services.baseclient.requests.get')
    def test_generic_get_invalid_json(self, mock_get):
        mock_get.return_value = mock_response('<html>Bad gateway</html>')
        res = self.ic.generic_get('http://url')
        self.assertFalse(res.ok)
        self.assertIn('Could not decode response', str(res.error))

    @mock.patch('infuralib.services.baseclient.requests.post')
    def test_generic_post_url_and_body(self, mock_post):
        mock_post.return_value = mock_response()
        self.ic.generic_post('http://url', {'method': 'eth_mining'})
        self.assertEqual(mock_post.call_args[0][0], 'http://url')
        self.assertEqual(mock_post.call_args[1]['json'], {'method': 'eth_mining'})

    @mock.patch('infuralib.services.baseclient.requests.post')
    def test_generic_post_data(self, mock_post):
        mock_post.return_value = mock_response('"test"')
        res = self.ic.generic_post('http://url')
        self.assertEqual(res.data, 'test')
        self.assertIsNone(mock_post.call_args[1]['json'])

    @mock.patch('infuralib.services.baseclient.requests.post')
    def test_generic_post_error(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError('test')
        res = self.ic.generic_post('http://url')
        self.assertFalse(res.ok)
        self.assertIsInstance(res.error, ClientError)


class TestInfuraClientEndpoints(unittest.TestCase):

    def setUp(self):
        self.ic = InfuraClient()
        patcher_get = mock.patch.object(InfuraClient, 'generic_get', return_value=ClientResult(data='test'))
        patcher_post = mock.patch.object(InfuraClient, 'generic_post', return_value=ClientResult(data='test'))
        self.mock_get = patcher_get.start()
        self.mock_post = patcher_post.start()
        self.addCleanup(mock.patch.stopall)

    def assert_get_url(self, url):
        self.assertEqual(self.mock_get.call_count, 1)
        self.assertEqual(self.mock_get.call_args[0][0], url)

    def test_get_client_methods(self):
        res = self.ic.get_client_methods()
        self.assert_get_url(BASE_URL + '/v1/jsonrpc/mainnet/methods')
        self.assertEqual(res.data, 'test')

    def test_get_client_methods_network(self):
        self.ic.get_client_methods('ropsten')
        self.assert_get_url(BASE_URL + '/v1/jsonrpc/ropsten/methods')

    def test_get_client_method(self):
        res = self.ic.get_client_method('eth_mining')
        self.assert_get_url(BASE_URL + '/v1/jsonrpc/mainnet/eth_mining')
        self.assertEqual(res.data, 'test')

    def test_get_client_method_network(self):
        InfuraClient('kovan').get_client_method('eth_blockNumber')
        self.assert_get_url(BASE_URL + '/v1/jsonrpc/kovan/eth_blockNumber')

    def test_empty_network_used_as_is(self):
        self.ic.get_client_methods(network='')
        self.assert_get_url(BASE_URL + '/v1/jsonrpc//methods')
        self.ic.get_client_method('eth_mining', network='')
        self.assertEqual(self.mock_get.call_args[0][0], BASE_URL + '/v1/jsonrpc//eth_mining')
        self.ic.post_client_method('eth_mining', network='')
        self.assertEqual(self.mock_post.call_args[0][0], BASE_URL + '/v1/jsonrpc/')
        self.assertEqual(InfuraClient('').network, '')

    def test_post_client_method(self):
        res = self.ic.post_client_method('eth_mining')
        self.assertEqual(self.mock_post.call_args[0], (BASE_URL + '/v1/jsonrpc/mainnet',
                                                       {'id': 1, 'jsonrpc': '2.0', 'method': 'eth_mining',
                                                        'params': []}))
        self.assertEqual(res.data, 'test')

    def test_post_client_method_params(self):
        params = ['0x407d73d8a49eeb85d32cf465507dd71d507100c1', 'latest']
        self.ic.post_client_method('eth_getBalance', params, network='rinkeby')
        url, body = self.mock_post.call_args[0]
        self.assertEqual(url, BASE_URL + '/v1/jsonrpc/rinkeby')
        self.assertEqual(body['params'], ['0x407d73d8a49eeb85d32cf465507dd71d507100c1', 'latest'])
        self.assertEqual(body['method'], 'eth_getBalance')

    def test_post_client_method_default_params_not_shared(self):
        self.ic.post_client_method('eth_mining')
        self.mock_post.call_args[0][1]['params'].append('x')
        self.ic.post_client_method('eth_mining')
        self.assertEqual(self.mock_post.call_args[0][1]['params'], [])

    def test_post_client_method_jsonrpc_version(self):
        InfuraClient(jsonrpc_version='1.0').post_client_method('eth_mining')
        self.assertEqual(self.mock_post.call_args[0][1]['jsonrpc'], '1.0')

    def test_get_ticker_symbols(self):
        self.ic.get_ticker_symbols()
        self.assert_get_url(BASE_URL + '/v1/ticker/symbols')

    def test_get_ticker_symbol(self):
        self.ic.get_ticker_symbol('ethusd')
        self.assert_get_url(BASE_URL + '/v1/ticker/ethusd')

    def test_get_ticker_symbol_full(self):
        self.ic.get_ticker_symbol_full('ethusd')
        self.assert_get_url(BASE_URL + '/v1/ticker/ethusd/full')

    def test_get_blacklist(self):
        self.ic.get_blacklist()
        self.assert_get_url(BASE_URL + '/v2/blacklist')

    def test_get_blacklist_api_version(self):
        self.ic.get_blacklist(api_version='v1')
        self.assert_get_url(BASE_URL + '/v1/blacklist')

    def test_endpoint_timeout(self):
        self.ic.get_ticker_symbol('ethbtc', timeout=2)
        self.assertEqual(self.mock_get.call_args[1]['timeout'], 2)

    def test_endpoint_error_result(self):
        self.mock_get.return_value = ClientResult(error=ClientError('test'))
        res = self.ic.get_ticker_symbols()
        self.assertFalse(res.ok)
        self.assertEqual(str(res.error), 'test')


if __name__ == '__main__':
    unittest.main()
