from __future__ import annotations

import uvicorn

from unithub.engine import build_app
from unithub.logs import setup_logging
from unithub.settings import HOST, PORT


def main() -> None:
    logger = setup_logging()
    app = build_app()
    logger.info("server.starting", url=f"http://localhost:{PORT}", host=HOST, port=PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
