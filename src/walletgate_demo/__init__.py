"""
walletgate_demo — Backend of the WalletGate EUDI wallet demo storefront.

Builds verification check lists for catalogue products and proxies
session calls to the WalletGate API.
"""

__version__ = "0.1.0"
