# use cases test

import pytest

from application.service.list_transactions import ListTransactionsService
from application.service.get_statistics import GetStatisticsService
from application.service.get_bar_chart import GetBarChartService
from application.service.get_pie_chart import GetPieChartService
from application.service.get_combined_data import GetCombinedDataService
from domain.exceptions import DatasetFetchError, InvalidMonthError
from domain.interfaces.transaction_repo import TransactionRepository
from domain.interfaces import MetricsPort, LoggingPort


@pytest.fixture
def mock_transaction_repo(mocker, transactions):
    """Fixture to create a mock of the repository using pytest-mock"""
    mock_repo = mocker.AsyncMock(spec=TransactionRepository)
    mock_repo.get_all_transactions.return_value = transactions
    return mock_repo


@pytest.fixture
def mock_failing_repo(mocker):
    mock_repo = mocker.AsyncMock(spec=TransactionRepository)
    mock_repo.get_all_transactions.side_effect = DatasetFetchError("Dataset returned 503")
    return mock_repo


@pytest.mark.asyncio
async def test_list_transactions_defaults(mock_transaction_repo):
    page = await ListTransactionsService(mock_transaction_repo).execute()
    assert page.page == 1
    assert page.per_page == 10
    assert page.total == 7
    assert len(page.transactions) == 7


@pytest.mark.asyncio
async def test_list_transactions_search_and_page(mock_transaction_repo):
    page = await ListTransactionsService(mock_transaction_repo).execute(search="e", page="2", per_page="2")
    # total counts the search matches, not the page
    assert page.total == 6
    assert [t.id for t in page.transactions] == [4, 5]


@pytest.mark.asyncio
async def test_list_transactions_unparseable_paging_falls_back(mock_transaction_repo):
    page = await ListTransactionsService(mock_transaction_repo).execute(page="abc", per_page="-1")
    assert (page.page, page.per_page) == (1, 10)


@pytest.mark.asyncio
async def test_list_transactions_page_beyond_end(mock_transaction_repo):
    page = await ListTransactionsService(mock_transaction_repo).execute(page=5, per_page=10)
    assert page.total == 7
    assert page.transactions == []


@pytest.mark.asyncio
async def test_statistics_for_march(mock_transaction_repo):
    stats = await GetStatisticsService(mock_transaction_repo).execute("March")
    assert stats.month == "March"
    assert stats.total_sale_amount == 1150
    assert (stats.total_sold_items, stats.total_not_sold_items) == (3, 1)


@pytest.mark.asyncio
@pytest.mark.parametrize("service_cls", [
    GetStatisticsService, GetBarChartService, GetPieChartService, GetCombinedDataService,
])
@pytest.mark.parametrize("month", ["Foo", "", None])
async def test_invalid_month_rejected_before_fetch(mock_transaction_repo, service_cls, month):
    with pytest.raises(InvalidMonthError):
        await service_cls(mock_transaction_repo).execute(month)
    mock_transaction_repo.get_all_transactions.assert_not_called()


@pytest.mark.asyncio
async def test_bar_chart_counts_month_records(mock_transaction_repo):
    buckets = await GetBarChartService(mock_transaction_repo).execute("July")
    assert len(buckets) == 10
    assert sum(b.count for b in buckets) == 2
    counts = {b.range: b.count for b in buckets}
    assert counts["0-100"] == 1
    assert counts["101-200"] == 1


@pytest.mark.asyncio
async def test_pie_chart_for_month_without_sales(mock_transaction_repo):
    assert await GetPieChartService(mock_transaction_repo).execute("January") == []


@pytest.mark.asyncio
async def test_combined_data_matches_individual_services(mock_transaction_repo):
    combined = await GetCombinedDataService(mock_transaction_repo).execute("March", page="1", per_page="3")
    assert [t.id for t in combined.transactions] == [1, 2, 3]
    assert combined.statistics == await GetStatisticsService(mock_transaction_repo).execute("March")
    assert combined.bar_chart == await GetBarChartService(mock_transaction_repo).execute("March")
    assert combined.pie_chart == await GetPieChartService(mock_transaction_repo).execute("March")


@pytest.mark.asyncio
async def test_combined_data_coerces_paging_like_listing(mock_transaction_repo):
    combined = await GetCombinedDataService(mock_transaction_repo).execute("March", page="x", per_page=None)
    assert [t.id for t in combined.transactions] == [1, 2, 3, 4]
    combined = await GetCombinedDataService(mock_transaction_repo).execute("March", page="2", per_page="3")
    assert [t.id for t in combined.transactions] == [4]


@pytest.mark.asyncio
async def test_fetch_failure_propagates(mock_failing_repo):
    with pytest.raises(DatasetFetchError):
        await GetStatisticsService(mock_failing_repo).execute("March")
    with pytest.raises(DatasetFetchError):
        await ListTransactionsService(mock_failing_repo).execute()


@pytest.mark.asyncio
async def test_metrics_and_logging_ports_are_used(mocker, mock_transaction_repo):
    metrics = mocker.Mock(spec=MetricsPort)
    logging_port = mocker.Mock(spec=LoggingPort)
    srv = GetPieChartService(mock_transaction_repo, metrics_port=metrics, logging_port=logging_port)

    await srv.execute("March")

    logging_port.bind.assert_called_once_with(endpoint="pie_chart", month="March")
    metrics.increment_request_total.assert_called_once_with(endpoint="pie_chart", outcome="ok")
    metrics.observe_transactions_returned.assert_called_once_with(endpoint="pie_chart", count=4)


@pytest.mark.asyncio
async def test_invalid_month_outcome_is_recorded(mocker, mock_transaction_repo):
    metrics = mocker.Mock(spec=MetricsPort)
    with pytest.raises(InvalidMonthError):
        await GetStatisticsService(mock_transaction_repo, metrics_port=metrics).execute("Foo")
    metrics.increment_request_total.assert_called_once_with(endpoint="statistics", outcome="invalid_month")


@pytest.mark.asyncio
async def test_error_outcome_is_recorded(mocker, mock_failing_repo):
    metrics = mocker.Mock(spec=MetricsPort)
    with pytest.raises(DatasetFetchError):
        await GetBarChartService(mock_failing_repo, metrics_port=metrics).execute("March")
    metrics.increment_request_total.assert_called_once_with(endpoint="bar_chart", outcome="error")
