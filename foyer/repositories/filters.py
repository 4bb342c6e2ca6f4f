from datetime import datetime

from sqlalchemy import asc, desc, or_

from foyer.exceptions import InvalidFilterError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1
LIKE_ESCAPE = "\\"


def cast_value(model, key: str, value):
    """Cast a raw query-string value to the Python type of ``model.key``.

    Returns ``None`` for blank values so the caller can skip the filter.
    """

    column = getattr(model, key).property.columns[0]
    try:
        python_type = column.type.python_type
    except (NotImplementedError, AttributeError):
        return value

    normalized_value = value.strip() if isinstance(value, str) else value
    if normalized_value == "":
        return None

    if python_type is bool:
        value_text = str(normalized_value).lower()
        if value_text in TRUE_VALUES:
            return True
        if value_text in FALSE_VALUES:
            return False
        raise InvalidFilterError(key, value)

    if python_type is int:
        value_text = str(normalized_value)
        try:
            int_value = int(value_text)
        except ValueError:
            try:
                float_value = float(value_text)
            except ValueError:
                raise InvalidFilterError(key, value)
            if not float_value.is_integer():
                raise InvalidFilterError(key, value)
            int_value = int(float_value)
        if not BIGINT_MIN <= int_value <= BIGINT_MAX:
            raise InvalidFilterError(key, value)
        return int_value

    if python_type is datetime:
        try:
            return datetime.fromisoformat(str(normalized_value))
        except ValueError:
            raise InvalidFilterError(key, value)

    try:
        return python_type(normalized_value)
    except (TypeError, ValueError):
        raise InvalidFilterError(key, value)


def apply_filters(query, model, params: dict, only_deleted: bool):
    query = query.filter(model.is_deleted == only_deleted)

    for key, value in params.items():
        if key not in model.__table__.columns or value is None:
            continue
        casted_value = cast_value(model, key, value)
        if casted_value is None:
            continue
        query = query.filter(getattr(model, key) == casted_value)
    return query


def escape_like(keyword: str) -> str:
    return (
        keyword.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def apply_search(query, model, keyword: str | None):
    """OR a substring match for ``keyword`` across every string column."""

    if not keyword:
        return query

    pattern = f"%{escape_like(keyword)}%"
    string_columns = []
    for column in model.__table__.columns:
        try:
            if column.type.python_type is str:
                string_columns.append(column)
        except (NotImplementedError, AttributeError):
            continue
    if not string_columns:
        return query
    return query.filter(or_(*(column.like(pattern, escape=LIKE_ESCAPE) for column in string_columns)))


def apply_sort(query, model, sort_by: str | None, sort_dir: str | None):
    if not sort_by:
        return query
    fields = [item.strip() for item in sort_by.split(",") if item.strip()]
    dirs = []
    if sort_dir:
        dirs = [item.strip().lower() for item in sort_dir.split(",") if item.strip()]
    order_by = []
    for idx, field in enumerate(fields):
        if field not in model.__table__.columns:
            continue
        direction = dirs[idx] if idx < len(dirs) else "asc"
        column = getattr(model, field)
        order_by.append(desc(column) if direction == "desc" else asc(column))
    if order_by:
        query = query.order_by(*order_by)
    return query
