"""Allow `python -m status_service` to run the runtime entrypoint."""

from status_service.main import main

main()
