"""Run the HTTP API under uvicorn."""

from __future__ import annotations

import uvicorn

from wheel_fitter.infra.config import server_host, server_port


def main() -> None:
    # lifespan="on": a failed store connection aborts startup with a non-zero exit
    uvicorn.run(
        "wheel_fitter.entrypoints.http.app:app",
        host=server_host(),
        port=server_port(),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
