def test_catalog_check(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["catalog-check"])
    assert result.exit_code == 0
    assert "Electronics: 6 products" in result.output
    assert "20 products, 8 on sale, 3 out of stock." in result.output


def test_recommend_seeded_is_repeatable(app):
    runner = app.test_cli_runner()
    first = runner.invoke(args=["recommend", "1", "--limit", "3", "--seed", "5"])
    second = runner.invoke(args=["recommend", "1", "--limit", "3", "--seed", "5"])
    assert first.exit_code == 0
    assert first.output == second.output
    lines = first.output.strip().splitlines()
    assert lines[0].startswith("Recommendations for #1 Wireless Noise-Cancelling Headphones")
    assert len(lines) == 4


def test_recommend_unknown_product(app):
    result = app.test_cli_runner().invoke(args=["recommend", "999"])
    assert result.exit_code != 0
    assert "Product 999 not found" in result.output
