from __future__ import annotations
import argparse, os

from .api import DEFAULT_CATS_PATH, DEFAULT_DOGS_PATH

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="InstaCats & InstaDogs feed viewer")
    p.add_argument("--base-url", default=os.getenv("FEEDS_BASE_URL", "https://api.myjson.com"))
    p.add_argument("--cats-path", default=os.getenv("CATS_PATH", DEFAULT_CATS_PATH))
    p.add_argument("--dogs-path", default=os.getenv("DOGS_PATH", DEFAULT_DOGS_PATH))
    p.add_argument("--cats-file", default=os.getenv("CATS_FILE"), help="read cats JSON from a file instead of HTTP")
    p.add_argument("--dogs-file", default=os.getenv("DOGS_FILE"), help="read dogs JSON from a file instead of HTTP")
    p.add_argument("--assets-dir", default=os.getenv("ASSETS_DIR"), help="directory holding bundled dog images")
    p.add_argument("--retries", type=int, default=int(os.getenv("MAX_RETRIES", "1")))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    return p

def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
