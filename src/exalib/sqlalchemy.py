"""Optional SQLAlchemy integration for exalib profiles"""

from typing import Any, Optional
from sqlalchemy import create_engine, Engine
from sqlalchemy.engine import URL
from exalib.connection.base import BaseConnector


def create_engine_from_profile(
    profile: Optional[str] = "default",
    pool_size: int = 5,
    max_overflow: int = 10,
    **engine_kwargs: Any
) -> Engine:
    """Create SQLAlchemy engine from an exalib profile (None uses the EXA* env vars)

    Requires the sqlalchemy-exasol dialect, which registers ``exa+websocket``.
    """
    connector = BaseConnector(profile)
    cfg = connector._cfg
    host, _, port = cfg["dsn"].rpartition(":")

    url = URL.create(
        "exa+websocket",
        username=cfg.get("user"),
        password=connector.password.get_secret_value() if connector.password else None,
        host=host or cfg["dsn"],
        port=int(port) if host and port else None,
        database=cfg.get("schema") or None,
    )

    connect_args = {}
    for key in ["encryption", "compression", "client_name"]:
        if key in cfg:
            connect_args[key] = cfg[key]

    return create_engine(
        url,
        connect_args=connect_args,
        pool_size=pool_size,
        max_overflow=max_overflow,
        **engine_kwargs
    )
