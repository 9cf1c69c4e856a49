# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#    Base Client
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

import json
import requests
from infuralib.main import *

_logger = logging.getLogger(__name__)


class ClientError(Exception):
    def __init__(self, msg='', status_code=None, url=None):
        self.msg = msg
        self.status_code = status_code
        self.url = url
        _logger.info(msg)

    def __str__(self):
        return self.msg


class ClientResult(object):
    """
    Outcome of a single request to a service provider.

    On success :attr:`ok` is True and :attr:`data` contains the decoded response body. On failure :attr:`ok` is
    False and :attr:`error` contains the :class:`ClientError` describing what went wrong. Transport failures are
    never raised by the client methods, so always check :attr:`ok` or call :meth:`unwrap`.

    >>> ClientResult(data={'result': '0x1'}).ok
    True
    >>> ClientResult(error=ClientError('Timeout')).ok
    False
    """

    def __init__(self, data=None, error=None):
        self.data = data
        self.error = error

    def __repr__(self):
        if self.ok:
            return "<ClientResult(ok, data=%s)>" % repr(self.data)
        return "<ClientResult(error=%s)>" % repr(str(self.error))

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """
        Return response data, or raise the error if the request failed

        :return: Decoded response body
        """
        if self.error is not None:
            raise self.error
        return self.data


class BaseClient(object):

    def __init__(self, provider, base_url, timeout=TIMEOUT_REQUESTS):
        self.provider = provider
        self.base_url = base_url
        self.timeout = timeout
        self.resp = None

    def request(self, url, method='get', post_data=None, timeout=None):
        """
        Send a GET or POST request and return the decoded JSON body.

        :param url: Fully qualified url
        :type url: str
        :param method: HTTP method, 'get' or 'post'
        :type method: str
        :param post_data: Dictionary or list to send as JSON body with a POST request
        :type post_data: dict, list
        :param timeout: Seconds to wait for a response, default is timeout of this client
        :type timeout: int, float

        :return: Decoded response body
        """
        if not url:
            raise ClientError("No url provided for %s request" % self.provider)
        if timeout is None:
            timeout = self.timeout
        headers = {
            'User-Agent': 'InfuraLib/%s' % INFURALIB_VERSION,
            'Accept': 'application/json',
        }
        try:
            if method == 'get':
                _logger.info("Url get request %s" % url)
                self.resp = requests.get(url, timeout=timeout, headers=headers)
            elif method == 'post':
                _logger.info("Url post request %s" % url)
                self.resp = requests.post(url, json=post_data, timeout=timeout, headers=headers)
            else:
                raise ClientError("Unsupported request method %s" % method, url=url)
        except requests.exceptions.Timeout as e:
            raise ClientError("Timeout after %s seconds connecting to %s on url %s: %s" %
                              (timeout, self.provider, url, e), url=url) from e
        except requests.exceptions.RequestException as e:
            raise ClientError("Error connecting to %s on url %s: %s" % (self.provider, url, e), url=url) from e

        resp_text = self.resp.text
        if len(resp_text) > 1000:
            resp_text = self.resp.text[:970] + '... truncated, length %d' % len(resp_text)
        _logger.debug("Response [%d] %s" % (self.resp.status_code, resp_text))
        if self.resp.status_code == 429:
            raise ClientError("Maximum number of requests reached for %s with url %s, response [%d] %s" %
                              (self.provider, url, self.resp.status_code, resp_text),
                              status_code=self.resp.status_code, url=url)
        elif not 200 <= self.resp.status_code < 300:
            raise ClientError("Error connecting to %s on url %s, response [%d] %s" %
                              (self.provider, url, self.resp.status_code, resp_text),
                              status_code=self.resp.status_code, url=url)
        try:
            return json.loads(self.resp.text)
        except ValueError as e:
            raise ClientError("Could not decode response from %s on url %s, response [%d] %s" %
                              (self.provider, url, self.resp.status_code, resp_text),
                              status_code=self.resp.status_code, url=url) from e
