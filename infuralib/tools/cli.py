# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#
#    CLI - Command line access to the Infura REST API
#    Query JSON-RPC methods, call methods, get ticker prices and the blacklist from the commandline
#
#    © 2024 - 1200 Web Development <http://1200wd.com/>
#

import sys
import json
import argparse
from pprint import pprint
from infuralib.services.infura import InfuraClient
from infuralib.main import INFURALIB_VERSION


def parse_param(value):
    """
    Parse commandline parameter as JSON value, i.e. numbers, booleans and lists. Return value as string if it
    can not be parsed.

    >>> parse_param('true')
    True
    >>> parse_param('latest')
    'latest'
    """
    try:
        return json.loads(value)
    except ValueError:
        return value


def parse_args(args=None):
    parser = argparse.ArgumentParser(description='InfuraLib command line client for the Infura API')
    parser.add_argument('--version', action='version', version='InfuraLib %s' % INFURALIB_VERSION)
    parser.add_argument('--network', '-n',
                        help="Specify 'kovan', 'mainnet', 'rinkeby' or 'ropsten' network")
    parser.add_argument('--api-version', '-a', default=None,
                        help="Override Infura API version used in urls")
    parser.add_argument('--timeout', '-t', type=float, default=None,
                        help="Seconds to wait for a response from the Infura API")

    subparsers = parser.add_subparsers(required=True, dest='subparser_name')
    subparsers.add_parser('methods', description="List supported JSON-RPC methods")
    parser_method = subparsers.add_parser('method', description="Show description of a JSON-RPC method")
    parser_method.add_argument('name', help="Name of JSON-RPC method, i.e. eth_blockNumber")
    parser_call = subparsers.add_parser('call', description="Call a JSON-RPC method")
    parser_call.add_argument('name', help="Name of JSON-RPC method, i.e. eth_getBalance")
    parser_call.add_argument('params', nargs='*', metavar='PARAM',
                             help="Parameters for this method in order. Values are parsed as JSON if possible, "
                                  "otherwise used as string")
    subparsers.add_parser('symbols', description="List ticker symbols")
    parser_ticker = subparsers.add_parser('ticker', description="Show ticker information for a symbol")
    parser_ticker.add_argument('symbol', help="Ticker symbol, i.e. ethusd")
    parser_ticker.add_argument('--full', '-f', action='store_true',
                               help="Show full ticker information with prices per exchange")
    subparsers.add_parser('blacklist', description="Show blacklist")

    return parser.parse_args(args)


def main(args=None):
    args = parse_args(args)
    client = InfuraClient(args.network, api_version=args.api_version, timeout=args.timeout)

    if args.subparser_name == 'methods':
        res = client.get_client_methods()
    elif args.subparser_name == 'method':
        res = client.get_client_method(args.name)
    elif args.subparser_name == 'call':
        res = client.post_client_method(args.name, [parse_param(p) for p in args.params])
    elif args.subparser_name == 'symbols':
        res = client.get_ticker_symbols()
    elif args.subparser_name == 'ticker':
        if args.full:
            res = client.get_ticker_symbol_full(args.symbol)
        else:
            res = client.get_ticker_symbol(args.symbol)
    else:
        res = client.get_blacklist(api_version=args.api_version)

    if not res.ok:
        print("Error: %s" % res.error, file=sys.stderr)
        return 1
    pprint(res.data)
    return 0


if __name__ == '__main__':
    sys.exit(main())
