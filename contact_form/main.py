from __future__ import annotations

import uvicorn

from contact_form.application.app import App
from contact_form.infrastructure.settings import HOST, PORT

app = App()


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    run()
