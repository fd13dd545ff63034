"""
🧪 test_stock.py — перевірка наявності складників набору.
"""

from pricing_engine.domain.combos import StockIssueKind, check_combo_stock_issues


def test_insufficient_and_out_of_stock_in_combo_order(catalog):
    combo = {"id": "c1", "products": ["p1", "p2", "p3", "ghost"], "productQuantities": {"p1": 3, "p2": 3}}
    issues = check_combo_stock_issues(combo, catalog)

    assert [(i.product_id, i.issue) for i in issues] == [
        ("p2", StockIssueKind.INSUFFICIENT),
        ("p3", StockIssueKind.OUT_OF_STOCK),
        ("ghost", StockIssueKind.OUT_OF_STOCK),
    ]
    assert issues[0].required == 3
    assert issues[0].available == 1
    assert issues[0].product_name == "Aceite"
    assert issues[2].product_name == "Unknown"
    assert issues[2].available == 0


def test_all_in_stock_returns_empty_list(catalog):
    assert check_combo_stock_issues({"products": ["p1", "p2"]}, catalog) == []


def test_no_combo_means_no_issues(catalog):
    assert check_combo_stock_issues(None, catalog) == []


def test_localized_product_name(catalog):
    combo = {"products": ["p1"], "product_quantities": {"p1": 10}}
    issue = check_combo_stock_issues(combo, catalog, language="en")[0]
    assert issue.product_name == "Rice 1kg"
    assert issue.to_dict() == {
        "productId": "p1",
        "productName": "Rice 1kg",
        "issue": "insufficient",
        "required": 10,
        "available": 5,
    }


def test_negative_stock_counts_as_out_of_stock():
    issues = check_combo_stock_issues({"products": ["x"]}, [{"id": "x", "name": "X", "stock": -4}])
    assert issues[0].issue is StockIssueKind.OUT_OF_STOCK
    assert issues[0].available == 0
