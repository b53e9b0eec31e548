import os
import ssl
from typing import Any, Optional

import httpx


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context():
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get("SSL_CERT_FILE"))
        requests_ca_bundle = expand_path(os.environ.get("REQUESTS_CA_BUNDLE"))
        ssl_cert_dir = expand_path(os.environ.get("SSL_CERT_DIR"))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(timeout: Optional[float] = None) -> dict[str, Any]:
    """Keyword arguments for the httpx clients created by the default transport.

    Covers SSL verification, timeout and redirect handling. Proxies are picked
    up by httpx from the usual ``HTTP(S)_PROXY`` variables.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": httpx.Timeout(timeout if timeout is not None else 30.0),
        "follow_redirects": True,
    }
