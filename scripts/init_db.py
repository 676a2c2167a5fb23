from __future__ import annotations

import importlib

from dotenv import load_dotenv

from mess_attendance.config import get_settings_module
from mess_attendance.container import db_config_from_settings
from mess_attendance.database.bootstrap import apply_schema, list_tables


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    target = db_config_from_settings(dict(settings.DB_CONFIG))

    apply_schema(target)
    tables = list_tables(target)
    print(
        "OK: Applied schema.sql -> "
        f"{target.user}@{target.host}:{target.port}/{target.database} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
