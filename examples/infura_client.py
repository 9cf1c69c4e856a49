# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#
#    EXAMPLES - Query the Infura API
#
#    © 2024 - 1200 Web Development <http://1200wd.com/>
#

from pprint import pprint
from infuralib.services.infura import InfuraClient


ic = InfuraClient('mainnet')

print("=== Supported JSON-RPC methods on %s" % ic.network)
res = ic.get_client_methods()
if res.ok:
    pprint(res.data)
else:
    print("Could not get methods: %s" % res.error)

print("\n=== Latest block number")
res = ic.post_client_method('eth_blockNumber')
if res.ok:
    print(int(res.data['result'], 16))
else:
    print("Call failed: %s" % res.error)

print("\n=== Balance of address on ropsten")
res = ic.post_client_method('eth_getBalance', ['0x407d73d8a49eeb85d32cf465507dd71d507100c1', 'latest'],
                            network='ropsten')
print(res)

print("\n=== Ticker information for ETH/USD")
pprint(ic.get_ticker_symbol('ethusd').data)

print("\n=== Blacklist (API version 2)")
res = ic.get_blacklist()
if res.ok:
    pprint(res.data)
else:
    print("Could not get blacklist: %s" % res.error)
