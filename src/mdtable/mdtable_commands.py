"""Editor commands for Markdown tables."""

from mdtable.mdtable_host import TableHost


EMPTY_TABLE = "| | |\n| | |\n"


def insert_table(host: TableHost) -> None:
    """
    Insert an empty two-by-two pipe table at the cursor.

    The table is inserted as plain text; it is rendered by the next
    rendering pass like any other table.

    Args:
        host: Editor host to insert into
    """
    host.insert_at_cursor(EMPTY_TABLE)
