from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Column:
    name: str
    table: str
    data_type: str | None = None


@dataclass
class Table:
    name: str
    columns: dict[str, Column] = field(default_factory=dict)

    def add_column(self, name: str, data_type: str | None = None) -> Column:
        column = self.columns.get(name)
        if column is None:
            column = Column(name=name, table=self.name, data_type=data_type)
            self.columns[name] = column
        return column

    def get_column_by_name(self, name: str) -> Column | None:
        return self.columns.get(name)


@dataclass
class Schema:
    tables: dict[str, Table] = field(default_factory=dict)

    def add_table(self, name: str) -> Table:
        table = self.tables.get(name)
        if table is None:
            table = Table(name=name)
            self.tables[name] = table
        return table

    def get_table_by_name(self, name: str) -> Table | None:
        return self.tables.get(name)

    def table_names(self) -> list[str]:
        return sorted(self.tables.keys())
