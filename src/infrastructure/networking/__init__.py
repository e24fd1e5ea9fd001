"""
Networking Infrastructure

- http: OAuth1.0a-signed REST transport, throttle and request dispatcher
"""
