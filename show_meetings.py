#!/usr/bin/env python3
"""
Print the Upcoming and History tabs for the seeded meeting store.

Usage:
  python show_meetings.py [QUERY]
  python show_meetings.py --dial MEETING_ID
"""
import os
import sys
import argparse
import logging
from uuid import UUID
from dotenv import load_dotenv

logging.basicConfig(level=logging.WARNING)  # Reduce noise

load_dotenv()
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tracker.meetings.dialer import dial
from tracker.meetings.selectors import select_tab
from tracker.meetings.store import get_meeting_store
from tracker.rendering.context_builder import TAB_TITLES
from tracker.rendering.plaintext import render_meeting_list


def _dial_meeting(meeting_id: str) -> int:
    try:
        meeting = get_meeting_store().get(UUID(meeting_id))
    except ValueError:
        meeting = None
    if meeting is None:
        print(f"Meeting {meeting_id} not found", file=sys.stderr)
        return 1

    if not dial(meeting.phone_number):
        print(f"Could not dial {meeting.formatted_phone_number}", file=sys.stderr)
        return 1
    print(f"Dialing {meeting.formatted_phone_number}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("query", nargs="?", default="", help="Search name, company or position")
    parser.add_argument("--dial", metavar="MEETING_ID", help="Call the meeting's phone number")
    args = parser.parse_args(argv)

    if args.dial:
        return _dial_meeting(args.dial)

    snapshot = get_meeting_store().snapshot()
    for tab in ("upcoming", "history"):
        print(render_meeting_list(TAB_TITLES[tab], select_tab(snapshot, tab, args.query)))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
