"""
Test data fixtures for label track converter tests.

Contains sample bookmark export documents in the shapes seen in real
exports: namespaced, prefixed, plain, and with missing fields.
"""

from typing import List

from labeltrack_converter.core.data_models import BookmarkRecord

# Two files, bookmarks interleaved, default namespace
SAMPLE_EXPORT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bookmarks xmlns="http://example.com/bookmarks/1.0">
  <bookmark>
    <name>Intro</name>
    <fileName>take1.wav</fileName>
    <filePosition>1200</filePosition>
  </bookmark>
  <bookmark>
    <name>Chorus</name>
    <fileName>take2.wav</fileName>
    <filePosition>300</filePosition>
  </bookmark>
  <bookmark>
    <name>Outro</name>
    <fileName>take1.wav</fileName>
    <filePosition>5400</filePosition>
  </bookmark>
</bookmarks>
"""

EXPECTED_SAMPLE_TRACKS = {
    "take1.wav_labelTrack.txt": "0\t0\ttake1.wav\n1200\t1200\t0\n5400\t5400\t1",
    "take2.wav_labelTrack.txt": "0\t0\ttake2.wav\n300\t300\t0",
}

# Prefixed namespace on every element
PREFIXED_EXPORT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bm:export xmlns:bm="urn:bookmarks" xmlns:f="urn:files">
  <bm:bookmark>
    <f:fileName>a.mp3</f:fileName>
    <f:filePosition>10</f:filePosition>
  </bm:bookmark>
</bm:export>
"""

# Bookmarks with missing or empty fields
INCOMPLETE_EXPORT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bookmarks>
  <bookmark>
    <fileName>a</fileName>
    <filePosition>10</filePosition>
  </bookmark>
  <bookmark>
    <filePosition>99</filePosition>
  </bookmark>
  <bookmark>
    <fileName>a</fileName>
  </bookmark>
  <bookmark>
    <fileName></fileName>
    <filePosition>42</filePosition>
  </bookmark>
  <bookmark>
    <fileName>a</fileName>
    <filePosition>30</filePosition>
  </bookmark>
</bookmarks>
"""

EMPTY_EXPORT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bookmarks xmlns="http://example.com/bookmarks/1.0"/>
"""

MALFORMED_EXPORT_XML = """<bookmarks>
  <bookmark>
    <fileName>a</fileName>
    <filePosition>10</filePosition>
  </bookmark>
"""

PARSER_ERROR_XML = """<html xmlns="http://www.w3.org/1999/xhtml">
  <body>
    <parsererror xmlns="http://www.mozilla.org/newlayout/xml/parsererror.xml">
      XML Parsing Error: no root element found
    </parsererror>
  </body>
</html>
"""


def create_records(pairs) -> List[BookmarkRecord]:
    """Build BookmarkRecords from (file_name, file_position) tuples."""
    return [BookmarkRecord(file_name=name, file_position=pos) for name, pos in pairs]


def create_export_xml(pairs) -> str:
    """Build an export document from (file_name, file_position) tuples; None omits the element."""
    parts = ['<?xml version="1.0" encoding="UTF-8"?>', "<bookmarks>"]
    for name, pos in pairs:
        parts.append("  <bookmark>")
        if name is not None:
            parts.append(f"    <fileName>{name}</fileName>")
        if pos is not None:
            parts.append(f"    <filePosition>{pos}</filePosition>")
        parts.append("  </bookmark>")
    parts.append("</bookmarks>")
    return "\n".join(parts)
