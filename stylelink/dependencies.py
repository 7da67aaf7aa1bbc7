from stylelink.services.essentials import EssentialsEnricher
from stylelink.services.link_resolver import LinkResolver


def get_resolver() -> LinkResolver:
    return LinkResolver()


def get_enricher() -> EssentialsEnricher:
    return EssentialsEnricher()
