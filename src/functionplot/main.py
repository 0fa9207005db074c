"""
Application Initialization
==========================
This module samples the function and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging (level from the FUNCTIONPLOT_LOG environment variable).
2. Samples the function once; the sample set is shared read-only by every repaint.
3. Instantiates the Main Window (View) and passes the samples into it.
"""
import logging
import sys

from functionplot import config
from functionplot.app.application import create_app
from functionplot.logging_config import level_from_env, setup_logging
from functionplot.model.sampler import FORMULA_TEXT, generate
from functionplot.view.main_window import MainWindow


logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging
    setup_logging(level=level_from_env(logging.INFO))

    # 2. Create the Qt Application
    app = create_app()

    # 3. Sample the function (once)
    samples = generate(config.DOMAIN_START, config.DOMAIN_END, config.DOMAIN_STEP)
    logger.info("Plotting %s with %d samples", FORMULA_TEXT, len(samples))

    # 4. Initialize the Main Window
    window = MainWindow(samples)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
