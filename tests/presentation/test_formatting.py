from xsl_reader.presentation.formatting import (
    ROOT_FOLDER,
    format_xml,
    group_entries_by_folder,
    listing_to_rows,
)


def test_format_xml_indents_nested_elements():
    assert format_xml("<root><item>1</item><empty/></root>") == (
        "<root>\n"
        "  <item>1</item>\n"
        "  <empty/>\n"
        "</root>"
    )


def test_format_xml_leaves_declaration_flush():
    text = '<?xml version="1.0"?><aa><bb><cc>x</cc></bb></aa>'
    assert format_xml(text).splitlines() == [
        '<?xml version="1.0"?>',
        "<aa>",
        "  <bb>",
        "    <cc>x</cc>",
        "  </bb>",
        "</aa>",
    ]


def test_format_xml_tolerates_malformed_input():
    assert format_xml("</a></b>") == "</a>\n</b>"


def test_group_entries_by_folder():
    grouped = group_entries_by_folder(["z/b.xml", "a.xml", "z/a.xml", "m/n/c.xml"])

    assert list(grouped) == [ROOT_FOLDER, "m/n", "z"]
    assert grouped["z"] == [("z/b.xml", "b.xml"), ("z/a.xml", "a.xml")]
    assert grouped[ROOT_FOLDER] == [("a.xml", "a.xml")]


def test_listing_to_rows():
    assert listing_to_rows(["d/x.xml"]) == [{"folder": "d", "file": "x.xml", "entry": "d/x.xml"}]


def test_format_xml_leaves_crlf_lines_flat():
    text = "<root>\r\n<item>1</item>\r\n</root>"
    assert format_xml(text) == text
