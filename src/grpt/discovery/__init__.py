from grpt.discovery.protocol import ServiceDiscovery, StaticDiscovery, static_discovery

__all__ = ["ServiceDiscovery", "StaticDiscovery", "static_discovery"]
