from .dns_resources import DNSResourceBuilder, DNSResourceHandle, DNSResourceModifier, DNSResources

__all__ = ["DNSResourceBuilder", "DNSResourceHandle", "DNSResourceModifier", "DNSResources"]
