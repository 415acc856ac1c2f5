"""CLI demo that exercises the :class:`pocket.Pocket` client.

Run with the virtual environment activated::

    python examples/demo_pocket.py

Set ``POCKET_CONSUMER_KEY`` / ``POCKET_ACCESS_TOKEN`` first, and optionally
``POCKET_SITE`` if you are not talking to ``https://getpocket.com``.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from pocket import ActionBatch, Pocket, TagFilter, retrieve_options

logging.basicConfig(level=logging.INFO)


def main() -> None:
    pocket = Pocket()

    options = retrieve_options(sort="oldest", count=5, tag=TagFilter.UNTAGGED, detail_type="simple")
    result = pocket.items.get(options)
    if not result.ok:
        print(f"Retrieve failed: {result.error}")
        return

    items = result.value.get("list") or {}
    print(f"Fetched {len(items)} untagged items")
    if not items:
        return

    item_ids = list(items)
    for item_id in item_ids:
        item = items[item_id]
        pprint({key: item.get(key) for key in ["item_id", "resolved_title", "resolved_url", "time_added"]})

    batch = ActionBatch().tags_add(item_ids, ["inbox", "triage"]).favorite(item_ids[0])
    print(f"\nSending {len(batch)} actions…")
    sent = pocket.items.send(batch)
    if sent.ok:
        print(f"Action results: {sent.value.get('action_results')}")
    else:
        print(f"Send failed: {sent.error}")


if __name__ == "__main__":
    main()
