"""
Broker Integrations

- etrade: E-Trade REST API client (OAuth1.0a, accounts, market, alerts, orders)
"""
