import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_int_env(name: str) -> Optional[int]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None

def log_level() -> str:
	return get_str_env("SPINARAK_LOG_LEVEL", "WARNING").strip().upper()


def chunk_size() -> int:
	size = get_int_env("SPINARAK_CHUNK_SIZE", 8192)
	if size < 1:
		logging.warning("SPINARAK_CHUNK_SIZE must be positive, got %d; using 8192", size)
		return 8192
	return size


def max_token_size() -> Optional[int]:
	size = get_optional_int_env("SPINARAK_MAX_TOKEN_SIZE")
	if size is not None and size < 1:
		logging.warning("SPINARAK_MAX_TOKEN_SIZE must be positive, got %d; ignoring", size)
		return None
	return size
