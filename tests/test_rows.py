import re
from itertools import islice

from csv_generator.utils.names import NameTable
from csv_generator.utils.rows import HEADERS, MAX_AGE, MIN_AGE, PersonRowGenerator


def test_rows_follow_column_invariants() -> None:
    generator = PersonRowGenerator(NameTable(names=("Ada", "Grace")), seed=99)

    for row in islice(generator.data_rows(), 2_000):
        row_id, name, age = row
        assert re.fullmatch(r"[0-9a-f]{64}", row_id)
        assert name in ("Ada", "Grace")
        assert len(age) == 2
        assert MIN_AGE <= int(age) <= MAX_AGE


def test_ages_cover_range_bounds() -> None:
    generator = PersonRowGenerator(seed="bounds")

    ages = {int(generator.make_row()[2]) for _ in range(5_000)}

    assert ages == set(range(MIN_AGE, MAX_AGE + 1))


def test_header_row() -> None:
    assert tuple(PersonRowGenerator().header_row()) == HEADERS == ("id", "name", "age")


def test_unseeded_rows_differ() -> None:
    generator = PersonRowGenerator()

    ids = {generator.make_row()[0] for _ in range(500)}

    assert len(ids) == 500


def test_seeded_generators_agree() -> None:
    first = PersonRowGenerator(seed=5)
    second = PersonRowGenerator(seed=5)

    assert list(islice(first.data_rows(), 50)) == list(islice(second.data_rows(), 50))


def test_empty_table_falls_back_to_blank_name() -> None:
    generator = PersonRowGenerator(NameTable(names=()))

    assert generator.make_row()[1] == ""
