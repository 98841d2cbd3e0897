"""
Run the site with uvicorn: `python -m showsreview` or `shows-review`.

Host and port come from the HOST / PORT environment variables
(default http://127.0.0.1:3000).
"""

import uvicorn

from showsreview.config import settings


def main() -> None:
    uvicorn.run(
        "showsreview.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
