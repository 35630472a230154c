"""Unit tests for the date / date_time helpers and function terms in conditions."""

import pytest

from smartquery import ErrorCode, QueryBuilder, ValidationError, date, date_time
from smartquery.constants import FunctionKind
from smartquery.query_builder import DateFunction, DateTimeFunction


class TestDate:
    """Test the date helper."""

    def test_field_form(self):
        """Test the two argument form wraps the qualified column."""
        term = date("orders", "created_at")
        assert isinstance(term, DateFunction)
        assert term.kind is FunctionKind.DATE
        assert term.expression == "date({orders:created_at})"

    def test_literal_form(self):
        """Test the literal form takes the first ten characters."""
        assert date("2020-01-31").expression == "date(substr('2020-01-31',1,10))"

    def test_literal_with_time_part(self):
        """Test a literal with a time part is still cut to the date."""
        assert date("2020-01-31T10:00:00").expression == "date(substr('2020-01-31T10:00:00',1,10))"

    def test_bad_table(self):
        """Test a bad table raises IDENTIFIER."""
        with pytest.raises(ValidationError) as exc_info:
            date("orders$", "created_at")
        assert exc_info.value.error_code is ErrorCode.IDENTIFIER

    def test_bad_field(self):
        """Test a bad field raises EXPRESSION."""
        with pytest.raises(ValidationError) as exc_info:
            date("orders", "created at")
        assert exc_info.value.error_code is ErrorCode.EXPRESSION

    def test_bad_literal(self):
        """Test a literal carrying more SQL raises EXPRESSION."""
        with pytest.raises(ValidationError) as exc_info:
            date("2020-01-31') OR (1")
        assert exc_info.value.error_code is ErrorCode.EXPRESSION

    @pytest.mark.parametrize("literal", [None, True])
    def test_non_string_literal(self, literal):
        """Test a literal that is not a string or number raises EXPRESSION."""
        with pytest.raises(ValidationError) as exc_info:
            date(literal)
        assert exc_info.value.error_code is ErrorCode.EXPRESSION


class TestDateTime:
    """Test the date_time helper."""

    def test_field_form(self):
        """Test the two argument form wraps the qualified column in substr."""
        term = date_time("orders", "created_at")
        assert isinstance(term, DateTimeFunction)
        assert term.expression == "datetime(substr({orders:created_at},0,24))"

    def test_literal_form(self):
        """Test the literal form keeps up to 24 characters."""
        term = date_time("2020-01-31T10:00:00.000")
        assert term.expression == "datetime(substr('2020-01-31T10:00:00.000',0,24))"

    def test_bad_literal(self):
        """Test a space-separated datetime literal raises EXPRESSION."""
        with pytest.raises(ValidationError) as exc_info:
            date_time("2020-01-31 10:00")
        assert exc_info.value.error_code is ErrorCode.EXPRESSION

    def test_builder_methods_delegate(self):
        """Test QueryBuilder.date and date_time return the module helpers' terms."""
        q = QueryBuilder()
        assert q.date("orders", "created_at") == date("orders", "created_at")
        assert q.date_time("2020-01-31") == date_time("2020-01-31")


class TestFunctionTermsInConditions:
    """Test function terms used as WHERE columns and criteria."""

    def test_date_column_and_criteria_are_unqualified(self):
        """Test date terms render bare on both sides of a condition."""
        q = QueryBuilder().select(["id"]).from_("orders")
        q.where(q.date("orders", "created_at"), ">=", q.date("2020-01-31"))
        assert q.render() == (
            "SELECT {orders:id} FROM {orders} "
            "WHERE date({orders:created_at}) >= date(substr('2020-01-31',1,10))"
        )

    def test_datetime_condition(self):
        """Test datetime terms inside an or_where condition."""
        q = QueryBuilder().select(["id"]).from_("orders")
        q.where("id", "=", 1).or_where(
            date_time("orders", "updated_at"), "<", date_time("2020-01-31T10:00:00.000")
        )
        assert q.render().endswith(
            "WHERE {orders:id} = 1 OR datetime(substr({orders:updated_at},0,24)) "
            "< datetime(substr('2020-01-31T10:00:00.000',0,24))"
        )

    def test_plain_column_with_function_criteria(self):
        """Test a plain column compared against a date literal term."""
        q = QueryBuilder().select(["id"]).from_("orders").where("day", "=", date("2020-01-31"))
        assert q.render().endswith("WHERE {orders:day} = date(substr('2020-01-31',1,10))")

    def test_date_of_dotted_field_is_rejected_in_where(self):
        """Test date() accepts a dotted field but where rejects the term."""
        term = date("orders", "created.at")
        assert term.expression == "date({orders:created.at})"
        with pytest.raises(ValidationError) as exc_info:
            QueryBuilder().where(term, "=", "1")
        assert exc_info.value.error_code is ErrorCode.EXPRESSION

    def test_hand_built_function_term_is_checked(self):
        """Test a hand-built function term must have a function shape."""
        with pytest.raises(ValidationError):
            QueryBuilder().where(DateFunction(expression="date(1) OR 1=1"), "=", "1")
