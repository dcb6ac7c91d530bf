"""credit_support.core -- public API for money, results and error values."""

from credit_support.core.decimal_math import (
    percent_of as percent_of,
)
from credit_support.core.decimal_math import (
    round_to_nearest as round_to_nearest,
)
from credit_support.core.decimal_math import (
    sum_d as sum_d,
)
from credit_support.core.errors import (
    CreditSupportError as CreditSupportError,
)
from credit_support.core.errors import (
    CurrencyMismatchError as CurrencyMismatchError,
)
from credit_support.core.errors import (
    FieldViolation as FieldViolation,
)
from credit_support.core.errors import (
    InvalidInputError as InvalidInputError,
)
from credit_support.core.money import (
    CSA_DECIMAL_CONTEXT as CSA_DECIMAL_CONTEXT,
)
from credit_support.core.money import (
    CURRENCY_SCHEME as CURRENCY_SCHEME,
)
from credit_support.core.money import (
    MAX_SIGNIFICANT_DIGITS as MAX_SIGNIFICANT_DIGITS,
)
from credit_support.core.money import (
    Money as Money,
)
from credit_support.core.money import (
    NonEmptyStr as NonEmptyStr,
)
from credit_support.core.money import (
    validate_currency as validate_currency,
)
from credit_support.core.result import (
    Err as Err,
)
from credit_support.core.result import (
    Ok as Ok,
)
from credit_support.core.result import (
    unwrap as unwrap,
)
