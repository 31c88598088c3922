"""SQLAlchemy ORM mixin – XlsxMixin and the acts_as_xlsx decorator."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, TypeVar

from openpyxl import Workbook
from openpyxl.styles import NamedStyle

from sqla_xlsx.adapters.sqlalchemy.introspection import SqlAlchemyIntrospector
from sqla_xlsx.adapters.sqlalchemy.query import afetch_records, fetch_records
from sqla_xlsx.application.export.columns import ColumnDef, normalize_columns
from sqla_xlsx.application.export.package import XlsxPackage
from sqla_xlsx.application.export.projector import I18nMode, TableProjector, normalize_i18n
from sqla_xlsx.config.settings import EnvSettingsLoader, ExportSettings
from sqla_xlsx.i18n import NullTranslator, Translator
from sqla_xlsx.kernel.errors import MissingSessionError
from sqla_xlsx.observability.logging import get_logger

_log = get_logger(__name__)

_UNSET: Any = object()

StyleSpec = NamedStyle | Mapping[str, Any] | str
TModel = TypeVar("TModel", bound=type)


@dataclass(frozen=True)
class XlsxConfig:
    """Class-level export defaults, read fresh on every ``to_xlsx`` call."""

    columns: tuple[ColumnDef, ...] | None = None
    i18n: I18nMode = False
    translator: Translator | None = None


class XlsxMixin:
    """Adds ``to_xlsx`` to a mapped model class.

    Mix into any concrete ORM model class that extends
    :class:`~sqlalchemy.orm.DeclarativeBase`::

        class User(XlsxMixin, Base):
            __tablename__ = "users"
            __xlsx_columns__ = ["id", "email", ("address.city", "City")]
            __xlsx_i18n__ = "app.fields"

            id: Mapped[int] = mapped_column(primary_key=True)

        package = User.to_xlsx(session, where={"active": True}, order="email")
        package.save("users.xlsx")

    Without ``__xlsx_columns__`` every mapped column is exported.
    """

    __xlsx_columns__: ClassVar[Any] = None
    __xlsx_i18n__: ClassVar[Any] = False
    __xlsx_translator__: ClassVar[Translator | None] = None

    @classmethod
    def xlsx_config(cls) -> XlsxConfig:
        columns = cls.__xlsx_columns__
        return XlsxConfig(
            columns=tuple(normalize_columns(columns)) if columns is not None else None,
            i18n=normalize_i18n(cls.__xlsx_i18n__),
            translator=cls.__xlsx_translator__,
        )

    @classmethod
    def to_xlsx(
        cls,
        session: Any = None,
        *,
        columns: Any = None,
        i18n: Any = _UNSET,
        headers: Sequence[Any] | None = None,
        types: str | Sequence[str | None] | None = None,
        style: StyleSpec | None = None,
        header_style: StyleSpec | None = None,
        data: Sequence[Any] | None = None,
        where: Any = None,
        order: Any = None,
        name: str | None = None,
        package: XlsxPackage | Workbook | None = None,
        translator: Translator | None = None,
        settings: ExportSettings | None = None,
    ) -> XlsxPackage:
        """Write the records as a new worksheet and return the package.

        Records come from ``data`` when given; otherwise they are queried
        through *session* with ``where`` and ``order``. When there are no
        records the package is returned without a new sheet.

        ``headers`` replaces label resolution entirely and must have one
        entry per column. ``types`` is a cell type tag for every data cell
        (``"string"``, ``"date"``, ...) or a per-column list of tags.
        ``header_style`` defaults to ``style``.
        """
        config = cls.xlsx_config()
        settings = settings or EnvSettingsLoader().load(ExportSettings)
        translator = translator or config.translator or NullTranslator()
        i18n_mode = config.i18n if i18n is _UNSET else normalize_i18n(i18n)

        if columns is not None:
            column_defs: list[ColumnDef] | None = normalize_columns(columns)
        elif config.columns is not None:
            column_defs = list(config.columns)
        else:
            column_defs = None

        projector = TableProjector(
            SqlAlchemyIntrospector(
                cls,
                translator,
                attributes_scope=settings.attributes_scope,
                models_scope=settings.models_scope,
            ),
            translator,
        )
        if column_defs is None:
            column_defs = projector.default_columns()
        # a failing call leaves the caller's package untouched
        header_row = projector.resolve_headers(column_defs, i18n_mode, headers)
        if data is None and session is None:
            raise MissingSessionError(cls.__name__)

        if isinstance(package, Workbook):
            package = XlsxPackage(package)
        package = package or XlsxPackage()
        row_style = package.add_style(style) if style is not None else None
        head_style = package.add_style(header_style) if header_style is not None else row_style

        if data is None:
            data = fetch_records(session, cls, where, order)

        projection = projector.project(data, column_defs, i18n=i18n_mode, headers=header_row, name=name)
        if projection is None:
            _log.debug("xlsx.no_records", model=cls.__name__)
            return package

        sheet = package.add_worksheet(projection.name)
        sheet.add_row(projection.headers, style=head_style)
        for row in projection.rows:
            sheet.add_row(row, style=row_style, types=types)
        if settings.autofit_columns:
            sheet.autofit(settings.max_column_width)

        _log.debug(
            "xlsx.sheet_added",
            model=cls.__name__,
            sheet=sheet.title,
            rows=len(projection.rows),
            columns=len(projection.headers),
        )
        return package

    @classmethod
    async def to_xlsx_async(cls, session: Any = None, **options: Any) -> XlsxPackage:
        """``to_xlsx`` for an :class:`~sqlalchemy.ext.asyncio.AsyncSession`.

        Dotted columns that cross relationships need those relationships
        eager-loaded, since rows are read after the query has completed.
        """
        if options.get("data") is None:
            if session is None:
                raise MissingSessionError(cls.__name__)
            options["data"] = await afetch_records(
                session, cls, options.get("where"), options.get("order")
            )
        return cls.to_xlsx(**options)


def acts_as_xlsx(
    columns: Any = None,
    i18n: I18nMode = False,
    translator: Translator | None = None,
) -> Callable[[TModel], TModel]:
    """Class decorator setting the export defaults of an :class:`XlsxMixin` model::

        @acts_as_xlsx(columns=["id", "created_at"], i18n="app.fields")
        class Order(XlsxMixin, Base):
            ...
    """

    def decorate(model: TModel) -> TModel:
        if not issubclass(model, XlsxMixin):
            raise TypeError(f"{model.__name__} must inherit XlsxMixin to use acts_as_xlsx")
        model.__xlsx_columns__ = columns
        model.__xlsx_i18n__ = i18n
        model.__xlsx_translator__ = translator
        model.xlsx_config()
        return model

    return decorate


__all__ = ["XlsxConfig", "XlsxMixin", "acts_as_xlsx"]
