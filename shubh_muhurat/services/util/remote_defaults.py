"""Endpoint settings for the remote shubh-muhurat service."""

import os

DEF_BASE_URL = "https://shubh-muhurat-server.onrender.com"
DEF_TIMEOUT_SECONDS = 15.0


def base_url() -> str:
    return os.getenv("SHUBH_MUHURAT_BASE_URL", DEF_BASE_URL).rstrip("/")


def geocode_url() -> str:
    return f"{base_url()}/api/geocode"


def muhurat_url() -> str:
    return f"{base_url()}/api/muhurat"


def request_timeout() -> float:
    return float(os.getenv("REMOTE_TIMEOUT_SECONDS", str(DEF_TIMEOUT_SECONDS)))
