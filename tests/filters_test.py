"""
Tests for search, month filtering and pagination.
"""
from domain.services.filters import filter_by_search, filter_by_month, coerce_positive_int, paginate


class TestSearch:
    def test_empty_search_matches_everything(self, transactions):
        assert filter_by_search(transactions, "") == transactions
        assert filter_by_search(transactions, None) == transactions

    def test_title_match_is_case_insensitive(self, transactions):
        result = filter_by_search(transactions, "gAmInG")
        assert [t.id for t in result] == [3]

    def test_description_match_is_case_insensitive(self, transactions):
        result = filter_by_search(transactions, "waterproof")
        assert [t.id for t in result] == [4]

    def test_matches_stringified_price(self, transactions):
        assert [t.id for t in filter_by_search(transactions, "44.6")] == [6]
        # integral prices read without a trailing .0
        assert [t.id for t in filter_by_search(transactions, "1000")] == [5]
        assert filter_by_search(transactions, "1000.0") == []

    def test_price_substring_matches(self, transactions):
        # 150 and 950 both contain "50"
        assert {t.id for t in filter_by_search(transactions, "50")} == {1, 2, 3}

    def test_no_match(self, transactions):
        assert filter_by_search(transactions, "submarine") == []


class TestMonthFilter:
    def test_keeps_only_month_across_years(self, transactions):
        march = filter_by_month(transactions, "03")
        assert [t.id for t in march] == [1, 2, 3, 4]
        assert {t.date_of_sale.year for t in march} == {2021, 2022}

    def test_empty_month(self, transactions):
        assert filter_by_month(transactions, "01") == []


class TestPagination:
    def test_first_page(self, transactions):
        assert [t.id for t in paginate(transactions, 1, 3)] == [1, 2, 3]

    def test_last_partial_page(self, transactions):
        assert [t.id for t in paginate(transactions, 3, 3)] == [7]

    def test_page_past_the_end_is_empty(self, transactions):
        assert paginate(transactions, 4, 3) == []

    def test_coerce_positive_int(self):
        assert coerce_positive_int("2", 1) == 2
        assert coerce_positive_int(5, 1) == 5
        assert coerce_positive_int(None, 10) == 10
        assert coerce_positive_int("abc", 10) == 10
        assert coerce_positive_int("0", 1) == 1
        assert coerce_positive_int("-3", 10) == 10
        assert coerce_positive_int("2.5", 1) == 1
