import os
import time
import unittest
from datetime import datetime, timezone

from gdrivewrap.controller import Subcommand
from gdrivewrap.controller.output_parser import (
    parse_key_values,
    parse_listing,
    parse_mkdir,
    parse_output,
    parse_sync_list,
)
from gdrivewrap.errors import UnsupportedFormatError
from gdrivewrap.models import EntryKind

LIST_OUTPUT = (
    "Id                                  Name           Type   Size     Created\n"
    "0B1                                 Share          dir             2018-11-01 10:20:30\n"
    "0F1                                 notes v2.txt   bin    1.5 KB   2018-11-02 08:00:00\n"
)

SYNC_LIST_OUTPUT = (
    "\n"
    "Id                                  Name           Created\n"
    "0S1                                 data           2018-11-03 12:00:00\n"
    "0S2                                 my photos      2018-11-04 13:30:15\n"
    "\n"
)


def _local(*fields: int) -> datetime:
    """A wall-clock time on this host, as the UTC instant gdrive meant."""
    return datetime(*fields).astimezone(timezone.utc)


class TestParseListing(unittest.TestCase):
    def test_header_and_two_rows(self) -> None:
        entries = parse_listing(LIST_OUTPUT)
        self.assertEqual(len(entries), 2)

        share, notes = entries
        self.assertEqual(share.id, "0B1")
        self.assertEqual(share.name, "Share")
        self.assertEqual(share.kind, EntryKind.DIRECTORY)
        self.assertIsNone(share.size)
        self.assertEqual(share.units, "")
        self.assertEqual(
            share.created_at, _local(2018, 11, 1, 10, 20, 30)
        )

        # Internal whitespace in names survives; padding does not.
        self.assertEqual(notes.name, "notes v2.txt")
        self.assertEqual(notes.kind, EntryKind.FILE)
        self.assertEqual(notes.size, 1.5)
        self.assertEqual(notes.units, "KB")
        self.assertEqual(notes.size_bytes, 1500)
        self.assertEqual(
            notes.created_at, _local(2018, 11, 2, 8, 0, 0)
        )

    def test_blank_lines_and_header_only(self) -> None:
        self.assertEqual(parse_listing("\n\nId   Name   Type   Size   Created\n\n"), [])
        self.assertEqual(parse_listing(""), [])

    def test_unmatched_rows_are_skipped(self) -> None:
        raw = LIST_OUTPUT + "this is not a listing row\n"
        self.assertEqual(len(parse_listing(raw)), 2)

    def test_unknown_type_code(self) -> None:
        raw = (
            "Id    Name     Type   Size   Created\n"
            "0D1   Report   doc             2018-11-01 10:20:30\n"
        )
        (entry,) = parse_listing(raw)
        self.assertEqual(entry.kind, EntryKind.UNKNOWN)
        self.assertEqual(entry.name, "Report")

    @unittest.skipUnless(hasattr(time, "tzset"), "time.tzset is not available")
    def test_created_is_read_in_host_zone(self) -> None:
        raw = "Id   Name   Type   Size   Created\n0F1  a.txt  bin  1 KB  2018-11-02 09:00:00\n"
        old_tz = os.environ.get("TZ")
        os.environ["TZ"] = "Asia/Tokyo"
        time.tzset()
        try:
            (entry,) = parse_listing(raw)
        finally:
            if old_tz is None:
                del os.environ["TZ"]
            else:
                os.environ["TZ"] = old_tz
            time.tzset()
        self.assertEqual(entry.created_at, datetime(2018, 11, 2, 0, 0, 0, tzinfo=timezone.utc))


class TestParseSyncList(unittest.TestCase):
    def test_rows_are_directories(self) -> None:
        entries = parse_sync_list(SYNC_LIST_OUTPUT)
        self.assertEqual([e.id for e in entries], ["0S1", "0S2"])
        self.assertEqual(entries[1].name, "my photos")
        self.assertTrue(all(e.kind is EntryKind.DIRECTORY for e in entries))
        self.assertEqual(
            entries[1].created_at, _local(2018, 11, 4, 13, 30, 15)
        )


class TestParseKeyValues(unittest.TestCase):
    def test_basic_record(self) -> None:
        self.assertEqual(
            parse_key_values("Id: 123\nName: foo bar\n"),
            {"id": "123", "name": "foo bar"},
        )

    def test_keys_lowercased_without_spaces_and_split_once(self) -> None:
        record = parse_key_values(
            "Mod Time: 2018-11-01 10:20:30\nUsed: 1.2 GB\n\nno colon here\n"
        )
        self.assertEqual(record["modtime"], "2018-11-01 10:20:30")
        self.assertEqual(record["used"], "1.2 GB")
        self.assertEqual(len(record), 2)


class TestParseOutput(unittest.TestCase):
    def test_dispatch_by_subcommand(self) -> None:
        self.assertEqual(len(parse_output(LIST_OUTPUT, Subcommand.LIST)), 2)
        self.assertEqual(len(parse_output(SYNC_LIST_OUTPUT, "Sync List")), 2)
        self.assertEqual(parse_output("User: me\n", "ABOUT"), {"user": "me"})
        self.assertEqual(parse_output("Id: X\n", Subcommand.INFO), {"id": "X"})

    def test_mkdir_returns_second_token(self) -> None:
        self.assertEqual(parse_output("Directory 0D9 created\n", "mkdir"), {"id": "0D9"})
        self.assertEqual(parse_mkdir("Directory 0D9 created"), "0D9")

    def test_mkdir_unexpected_output(self) -> None:
        with self.assertRaises(UnsupportedFormatError):
            parse_mkdir("oops")

    def test_transfer_output_is_opaque_log(self) -> None:
        raw = "Uploading a.txt\nUploaded 0F9 at 1 KB/s, total 1 KB\n"
        for kind in ("upload", "update", "download", "sync upload", "sync download"):
            self.assertEqual(parse_output(raw, kind), {"log": raw})

    def test_unknown_command_is_unsupported(self) -> None:
        with self.assertRaises(UnsupportedFormatError) as ctx:
            parse_output("whatever", "share")
        self.assertIn("share", str(ctx.exception))
        self.assertEqual(ctx.exception.details["command"], "share")


if __name__ == "__main__":
    unittest.main()
