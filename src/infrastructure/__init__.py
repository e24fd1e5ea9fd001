"""
Infrastructure Components

Broker-agnostic foundations for the brokerage API client:
- networking: signed, throttled REST transport
- logging: structured logger factory
- exceptions: error taxonomy shared by transport and broker layers
"""
