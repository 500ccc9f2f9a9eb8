# sparmanager

An interactive console program for running a chain of supermarket branches.
It keeps track of the branches, the suppliers that work with the chain, and
the products each supplier provides and each branch sells.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
sparmanager
sparmanager --catalog path/to/suppliers.txt
```

`--catalog` names the supplier file to load; it defaults to `suppliers.txt`
in the current directory.

At start-up the program asks you to enter one or more branches. It then adds
three sample branches ("Super Duper", "David super" and "KS") and loads
suppliers and their products from the supplier file. If the file is missing,
or a supplier record in it is incomplete or holds an unknown product type, it
asks you to type the suppliers in instead. It then lists the branches,
suppliers and products.

After that a main menu is shown:

| Key | Action |
|-----|--------|
| 1 | Add a new branch |
| 2 | Find which branches sell a product, or who supplies it |
| 3 | Add a new product, or link an existing one to a supplier and a branch |
| 4 | Show one branch and all its products |
| 5 | Show all branches |
| 6 | Show all products of a supplier |
| 7 | Show the branches that sell a product type |
| 8 | Show the suppliers of a product type |
| 9 | Show all products sold in a branch (by name or code) |
| a | Sort the products by name, code or type |
| b | Binary-search the sorted products by the current sort key |
| c | Reorder the branches by code or by name |
| e | Exit |

The menu also ends when input runs out.

## Input formats

- Branch codes have exactly 5 digits, supplier codes exactly 6 digits.
- Product codes are strings of exactly 6 digits.
- Branch and supplier names must not already be taken (compared ignoring case).
- Addresses are entered as country, city, street and number; they are stored
  joined with `#`, with each part trimmed, each word capitalised and each
  whitespace character replaced by `&`.
- Dates are entered as `dd^^mm^^yyyy`, with a year of 2024 or later and a day
  that fits the month (February allows up to 29).

## The supplier file

The first line of the file is a header and is ignored. Then, for each
supplier: its name on its own line, its numeric code, and the number of
products that follow. Each product is a name line followed by a line holding
its code and a numeric type (`0` food, `1` cleaning, `2` general):

```
Suppliers
Fresh Farms
123456
2
Milk
100001 0
Bread
100002 0
Clean Co
234567
1
Soap
200001 1
```

Products loaded from the file get a manufacture date of 20/5/2024 and an
expiration date of 20/7/2024, and are recorded as supplied by the supplier
they are listed under.

## Using it as a library

```python
import io
from sparmanager.console import Console
from sparmanager.app import App

console = Console(io.StringIO("..."), io.StringIO())
app = App(console, "suppliers.txt")
app.setup()
app.run()
```

- `sparmanager.supermarket_manager.SupermarketManager` keeps branches ordered
  by code or by name (`SortOrder`), with `add`, `remove`, `find`, `resort`
  and `update`.
- `sparmanager.supplier_manager.SupplierManager` holds suppliers, and
  `load_catalog` reads a supplier file from any text stream, returning the
  suppliers and a list of products.
- `sparmanager.product_manager.ProductManager` holds products, sorts them
  (`SortKey`), searches them, and answers questions such as
  `suppliers_by_type`, `supermarkets_by_type`, `products_in_supermarket` and
  `products_of_supplier`.
- `sparmanager.dates.parse_date` parses and checks `dd^^mm^^yyyy` dates,
  raising `DateError` when they are not valid.
- `sparmanager.address.build_address` builds a stored address from its parts.

## Limitations

Everything is kept in memory only: branches, suppliers and products entered
during a session are not saved, and the supplier file is only ever read.
The menu offers no way to remove or edit branches, suppliers or products.