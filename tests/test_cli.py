import sqlite3

import pytest

from hexproducts.cli import build_parser, main
from hexproducts.sqlite_store import ProductDb


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    conn = sqlite3.connect(tmp_path / "db.sqlite")
    conn.execute(
        'CREATE TABLE products ("id" string, "name" string, "price" float, "status" string)'
    )
    conn.execute('insert into products values("abc", "Product Test", 0, "disabled")')
    conn.commit()
    conn.close()
    return tmp_path


def stored(workdir, product_id):
    conn = sqlite3.connect(workdir / "db.sqlite")
    try:
        return ProductDb(conn).get(product_id)
    finally:
        conn.close()


def test_default_action_is_enable():
    args = build_parser().parse_args(["cli"])
    assert args.action == "enable"
    assert args.product_id == ""
    assert args.price == 0.0


def test_parser_reads_short_flags():
    args = build_parser().parse_args(["cli", "-a", "create", "-n", "Thing", "-p", "25.0"])
    assert (args.action, args.product_name, args.price) == ("create", "Thing", 25.0)


def test_get_product(workdir, capsys):
    assert main(["cli", "-a", "get", "-i", "abc"]) == 0
    out = capsys.readouterr().out
    assert out == "Product ID: abc\nName: Product Test\nPrice: 0.000000\nStatus: disabled\n"


def test_create_product(workdir, capsys):
    assert main(["cli", "-a=create", "-n=ProductCLI", "-p=25.0"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith(
        "with the name ProductCLI has been created with the price 25.000000 and status disabled"
    )
    product_id = out.split()[2]
    product = stored(workdir, product_id)
    assert product.name == "ProductCLI"
    assert product.price == 25.0


def test_enable_error_is_printed(workdir, capsys):
    assert main(["cli", "-i", "abc"]) == 0
    out = capsys.readouterr().out
    assert out == "The price must be greater than zero to enable the product\n\n"
    assert stored(workdir, "abc").status == "disabled"


def test_disable_product(workdir, capsys):
    assert main(["cli", "-a", "disable", "--id", "abc"]) == 0
    assert capsys.readouterr().out == "Product Product Test has been disabled.\n"


def test_missing_product_prints_error(workdir, capsys):
    assert main(["cli", "-a", "get", "-i", "missing"]) == 0
    out = capsys.readouterr().out
    assert "missing" in out
    assert out.endswith("\n\n")


def test_no_command_prints_help(workdir, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "cli" in out and "http" in out


def test_unknown_option_fails(workdir, capsys):
    assert main(["cli", "--bogus"]) == 1
    assert "--bogus" in capsys.readouterr().err