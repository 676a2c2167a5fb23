"""Development server: ``python -m mess_attendance``."""

from __future__ import annotations

import os

from .main import create_app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))


if __name__ == "__main__":  # pragma: no cover
    run()
