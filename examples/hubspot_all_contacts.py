#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from pagewalk import APIClient, ClientSettings, OffsetField, flatten_path


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every HubSpot contact via offset pagination")
    p.add_argument("api_key")
    p.add_argument("count", nargs="?", type=int, default=100)
    p.add_argument("--threshold", type=int, default=3)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    settings = ClientSettings(api_key=args.api_key, error_threshold=args.threshold)
    async with APIClient(settings) as client:
        descriptor = client.request(
            "GET",
            "/contacts/v1/lists/all/contacts/all",
            query_params={"count": str(args.count)},
            pagination=OffsetField("vidOffset", "vid-offset"),
        )
        pages = await client.execute_all(descriptor)

    contacts = flatten_path(pages, ["contacts"])
    print("=" * 40)
    print(f"Pages    : {len(pages)}")
    print(f"Contacts : {len(contacts)}")
    print("=" * 40)
    for contact in contacts[:10]:
        print(contact.get("vid"))


if __name__ == "__main__":
    asyncio.run(main())
