# ===============================================
# tests/test_source.py
# -----------------------------------------------
# Roster loading: JSON / YAML files, validation
# errors, duplicate ids, and the packaged roster.
# ===============================================

import json

import pytest
import yaml

from yellowpages.search import (
    Contact,
    FileRecordSource,
    RecordSourceError,
    StaticRecordSource,
    load_records,
)
from yellowpages.settings import PACKAGED_ROSTER

PEOPLE = [
    {"id": "a", "firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com", "department": "Research"},
    {"id": "b", "firstName": "Alan", "lastName": "Turing", "email": "alan@example.com", "nicknames": ["Prof"]},
]


def test_load_json_list(tmp_path):
    p = tmp_path / "roster.json"
    p.write_text(json.dumps(PEOPLE), encoding="utf-8")
    contacts = load_records(p)
    assert [c.id for c in contacts] == ["a", "b"]
    assert contacts[0].department == "Research"
    assert contacts[1].nicknames == ["Prof"]


def test_load_yaml_mapping(tmp_path):
    p = tmp_path / "roster.yaml"
    p.write_text(yaml.safe_dump({"contacts": PEOPLE}), encoding="utf-8")
    contacts = load_records(p)
    assert [c.last_name for c in contacts] == ["Lovelace", "Turing"]


def test_missing_file(tmp_path):
    with pytest.raises(RecordSourceError, match="not found"):
        load_records(tmp_path / "nope.json")


def test_unsupported_suffix(tmp_path):
    p = tmp_path / "roster.csv"
    p.write_text("id,firstName\n", encoding="utf-8")
    with pytest.raises(RecordSourceError, match="Unsupported"):
        load_records(p)


def test_unparseable_json(tmp_path):
    p = tmp_path / "roster.json"
    p.write_text("[{", encoding="utf-8")
    with pytest.raises(RecordSourceError, match="not parseable"):
        load_records(p)


def test_wrong_document_shape(tmp_path):
    p = tmp_path / "roster.json"
    p.write_text(json.dumps({"people": PEOPLE}), encoding="utf-8")
    with pytest.raises(RecordSourceError, match="expected a list"):
        load_records(p)


def test_invalid_record_reports_index(tmp_path):
    p = tmp_path / "roster.json"
    p.write_text(json.dumps([PEOPLE[0], {"id": "c", "firstName": "No", "lastName": "Email"}]), encoding="utf-8")
    with pytest.raises(RecordSourceError, match="record #1"):
        load_records(p)


def test_duplicate_ids_rejected():
    with pytest.raises(RecordSourceError, match="duplicate"):
        StaticRecordSource([PEOPLE[0], dict(PEOPLE[1], id="a")])


def test_static_source_accepts_contacts_and_snake_case():
    c = Contact(id="x", first_name="Grace", last_name="Hopper", email="grace@example.com")
    src = StaticRecordSource([c, {"id": "y", "first_name": "Edsger", "last_name": "Dijkstra", "email": "ed@example.com"}])
    assert [r.id for r in src.records()] == ["x", "y"]


def test_file_source_loads_once(tmp_path):
    p = tmp_path / "roster.json"
    p.write_text(json.dumps(PEOPLE), encoding="utf-8")
    src = FileRecordSource(p)
    first = src.records()
    p.write_text("[]", encoding="utf-8")
    assert src.records() is first


def test_contact_json_is_camel_case_without_nulls():
    c = Contact.model_validate(PEOPLE[0])
    assert c.to_json() == {
        "id": "a",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "department": "Research",
    }


def test_packaged_roster_is_consistent():
    contacts = load_records(PACKAGED_ROSTER)
    by_id = {c.id: c for c in contacts}
    assert len(by_id) == len(contacts) > 0
    for c in contacts:
        if c.manager_id:
            assert c.id in (by_id[c.manager_id].reports or [])
        for r in c.reports or []:
            assert by_id[r].manager_id == c.id


def test_undecodable_file(tmp_path):
    p = tmp_path / "roster.json"
    p.write_bytes(b'[{"id": "1", "firstName": "\xff", "lastName": "X", "email": "x@example.com"}]')
    with pytest.raises(RecordSourceError, match="UTF-8") as exc:
        load_records(p)
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_directory_instead_of_file(tmp_path):
    d = tmp_path / "roster.json"
    d.mkdir()
    with pytest.raises(RecordSourceError, match="not readable") as exc:
        load_records(d)
    assert isinstance(exc.value.__cause__, OSError)


def test_yaml_numbers_become_strings(tmp_path):
    p = tmp_path / "roster.yaml"
    p.write_text(
        "- id: 7\n"
        "  firstName: Kay\n"
        "  lastName: Nine\n"
        "  email: kay@example.com\n"
        "  phone: 5551234\n"
        "  office: 404\n",
        encoding="utf-8",
    )
    (c,) = load_records(p)
    assert (c.id, c.phone, c.office) == ("7", "5551234", "404")
