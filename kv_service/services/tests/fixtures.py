"""Common test fixtures for key-value web-services."""

from typing import Callable, Optional
import urllib.error
import urllib.request
from time import sleep, time
from multiprocessing import get_context
from multiprocessing.process import BaseProcess

import pytest
from flask import Flask


@pytest.fixture(name="run_service")
def run_service(request) -> Callable:
    """
    Returns function that, if called, runs a flask-app in a separate
    process. Before returning, it is ensured that the app is responsive.

    It accepts either of the following
    * from_factory: call a factory to get the app (this is relevant if,
        for example, the factory executes other code that is needed to
        be run within the process where the app itself is running)
    * app: a pre-existing app

    The sub-process lives only in pytest's 'function'-scope.
    """

    def _(
        app: Optional[Flask] = None,
        from_factory: Optional[Callable[[], Flask]] = None,
        port: int = 8080,
        timeout: float = 5,
        probing_path: str = "ping",
    ) -> BaseProcess:
        if app is None and from_factory is None:
            raise ValueError("Missing either 'app' or 'from_factory'.")

        def run_process():
            _app = from_factory() if from_factory else app
            _app.run(
                host="0.0.0.0",
                port=port,
                debug=False,
                threaded=True,
            )
        # closure-target requires fork
        p = get_context("fork").Process(target=run_process)
        p.start()

        def kill_process():
            if p.is_alive():
                p.kill()
                p.join()
        request.addfinalizer(kill_process)

        # wait for service to have started up
        t0 = time()
        running = False
        while not running and time() - t0 < timeout:
            try:
                running = urllib.request.urlopen(
                    f"http://localhost:{port}/{probing_path}"
                ).status == 200
            except (urllib.error.URLError, ConnectionResetError):
                sleep(0.01)
        if not running:
            raise RuntimeError("Service did not start.")

        return p
    yield _
