"""``pacrecords-fetch``: call a PAC web service and show the result."""
from __future__ import annotations

import argparse
import json
import logging
from pprint import pprint

from pacrecords.core.config import load_settings
from pacrecords.infrastructure import WebServiceClient


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(
        prog="pacrecords-fetch", description="Call a PAC web service and show the result"
    )
    parser.add_argument("service", nargs="?", default="GetRecords_dev", help="service name, e.g. GetRecords")
    parser.add_argument("query", nargs="?", default="SCY", help="query string sent to the service")
    parser.add_argument("--log-level", default=settings.log_level, help="logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    with WebServiceClient() as client:
        data = json.loads(client.get_data(args.service, args.query))

    print("Envelope:")
    pprint(data)
    if data["status"] > 0:
        # the content is another JSON document
        records = json.loads(data["content"])
        print(f"\n{len(records)} records:")
        pprint(records)
    elif data["status"] == 0:
        print("\nContent is EMPTY!")
    else:
        print(f"\nNo content, error instead. Status={data['status']}, error='{data['error']}'")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
