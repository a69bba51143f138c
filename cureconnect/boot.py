"""
Startup validation.

Used by:
1. Application startup (main.py lifespan) -> mode="critical"
2. Deploy pipelines -> ``python -m cureconnect.boot --mode dry-run``
"""

import asyncio
import sys
import time
from dataclasses import dataclass
from enum import Enum

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from cureconnect.config import Settings, settings
from cureconnect.logger import configure_logging, get_logger

logger = get_logger(__name__)


class BootMode(str, Enum):
    CRITICAL = "critical"  # config + database, exit on failure
    DRY_RUN = "dry-run"  # config only


@dataclass
class ServiceStatus:
    service: str
    status: str  # 'ok' | 'error'
    message: str
    duration_ms: float = 0.0


class Bootloader:
    """Refuses to serve traffic without a signing secret and a reachable database."""

    @staticmethod
    async def validate(mode: BootMode = BootMode.CRITICAL, config: Settings = settings) -> bool:
        """Return True when every check for ``mode`` passes.

        In CRITICAL mode a failed check terminates the process with exit code 1.
        """
        logger.info("Bootloader starting validation", mode=mode.value)

        ok = Bootloader._check_static_config(config)
        if ok and mode == BootMode.CRITICAL:
            res = await Bootloader._check_database(config)
            ok = res.status == "ok"
            log = logger.info if ok else logger.error
            log("Database check finished", status=res.status, detail=res.message, duration_ms=round(res.duration_ms, 2))

        if not ok and mode == BootMode.CRITICAL:
            logger.critical("Startup checks failed. Refusing to start.")
            sys.exit(1)

        logger.info("Bootloader validation finished", mode=mode.value, ok=ok)
        return ok

    @staticmethod
    def _check_static_config(config: Settings) -> bool:
        if not config.secret_key:
            logger.error("Configuration load failed", error="JWT_SECRET is not set")
            return False
        try:
            _ = config.database_url
        except Exception as e:
            logger.error("Configuration load failed", error=str(e))
            return False
        return True

    @staticmethod
    async def _check_database(config: Settings) -> ServiceStatus:
        """SELECT 1 on a throwaway engine so the app pool is untouched."""
        start = time.perf_counter()
        engine = None
        try:
            engine = create_async_engine(config.database_url, echo=False)
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            return ServiceStatus("database", "error", str(e), (time.perf_counter() - start) * 1000)
        finally:
            if engine is not None:
                await engine.dispose()
        return ServiceStatus("database", "ok", "Connection successful", (time.perf_counter() - start) * 1000)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Validate configuration before deploying")
    parser.add_argument("--mode", default=BootMode.CRITICAL.value, choices=[m.value for m in BootMode])
    args = parser.parse_args()
    configure_logging()

    try:
        passed = asyncio.run(Bootloader.validate(BootMode(args.mode)))
    except KeyboardInterrupt:
        sys.exit(130)

    sys.exit(0 if passed else 1)
