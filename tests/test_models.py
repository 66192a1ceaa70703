"""Tests for Pydantic models and the invoice update plan."""
import pytest
from datetime import date
from pydantic import ValidationError
from structlog.testing import capture_logs

from biztime.models import (
    CompanyCreate, CompanyUpdate, CompanyWithInvoices, IndustryCreate,
    InvoiceResponse, InvoiceStatus, InvoiceUpdate, InvoiceUpdateKind,
    VALID_PAYMENT_TRANSITIONS,
)
from biztime.services.invoicing import (
    InvoiceUpdatePlan, log_payment_transition, paid_date_for
)


class TestCompanyModels:
    """Tests for Company models."""

    def test_company_create_slugifies_code(self):
        company = CompanyCreate(code="Apple Computer", name="Apple")
        assert company.code == "apple-computer"

    def test_company_create_all_optional(self):
        """Missing fields are left for the store to reject."""
        company = CompanyCreate()
        assert company.code is None
        assert company.name is None
        assert company.description is None

    def test_company_update_ignores_code(self):
        update = CompanyUpdate(code="other", name="New Name")
        assert update.model_dump() == {"name": "New Name", "description": None}

    def test_company_with_invoices_defaults(self):
        company = CompanyWithInvoices(code="abc", name="ABC")
        assert company.invoices == []
        assert company.industries == []


class TestIndustryModels:
    """Tests for Industry models."""

    def test_industry_create_slugifies_code(self):
        assert IndustryCreate(code="Health Care", name="Health").code == "health-care"


class TestInvoiceModels:
    """Tests for Invoice models."""

    def test_invoice_response_coerces_store_values(self):
        """SQLite hands back 0/1 and ISO strings."""
        invoice = InvoiceResponse(
            id=1, comp_code="abc", amt=100, paid=1,
            add_date="2026-01-05", paid_date="2026-02-01",
        )
        assert invoice.paid is True
        assert invoice.amt == 100.0
        assert invoice.add_date == date(2026, 1, 5)
        assert invoice.paid_date == date(2026, 2, 1)

    def test_invoice_update_rejects_non_boolean(self):
        with pytest.raises(ValidationError):
            InvoiceUpdate(paid="sometimes")

    def test_invoice_update_tracks_sent_fields(self):
        assert InvoiceUpdate(amt=5).model_fields_set == {"amt"}
        assert InvoiceUpdate(paid=None).model_fields_set == {"paid"}


class TestInvoiceUpdateKind:
    """Tests for classifying invoice PUT bodies."""

    @pytest.mark.parametrize("fields, kind", [
        ({"amt"}, InvoiceUpdateKind.AMOUNT_ONLY),
        ({"paid"}, InvoiceUpdateKind.PAID_ONLY),
        ({"amt", "paid"}, InvoiceUpdateKind.BOTH),
        (set(), InvoiceUpdateKind.NEITHER),
    ])
    def test_from_fields(self, fields, kind):
        assert InvoiceUpdateKind.from_fields(fields) is kind

    def test_payment_transitions(self):
        assert InvoiceStatus.of(1) is InvoiceStatus.PAID
        assert InvoiceStatus.of(False) is InvoiceStatus.UNPAID
        for status, targets in VALID_PAYMENT_TRANSITIONS.items():
            assert status not in targets


class TestInvoiceUpdatePlan:
    """Tests for the statement chosen for each kind of update."""

    on = date(2026, 3, 14)

    def test_amount_only(self):
        plan = InvoiceUpdatePlan.build(1, {"amt"}, amt=10.0, on=self.on)

        assert plan.kind is InvoiceUpdateKind.AMOUNT_ONLY
        assert plan.params == {"id": 1, "amt": 10.0}
        assert "paid" not in plan.statement.split("WHERE")[0]
        assert plan.touches_payment is False

    def test_paid_only_stamps_date(self):
        plan = InvoiceUpdatePlan.build(1, {"paid"}, paid=True, on=self.on)

        assert plan.kind is InvoiceUpdateKind.PAID_ONLY
        assert plan.params == {"id": 1, "paid": True, "paid_date": "2026-03-14"}
        assert "amt" not in plan.statement.split("WHERE")[0]

    def test_paid_only_false_clears_date(self):
        plan = InvoiceUpdatePlan.build(1, {"paid"}, paid=False, on=self.on)

        assert plan.params["paid_date"] is None

    def test_both(self):
        plan = InvoiceUpdatePlan.build(2, {"amt", "paid"}, amt=5.0, paid=True, on=self.on)

        assert plan.kind is InvoiceUpdateKind.BOTH
        assert plan.params == {"id": 2, "amt": 5.0, "paid": True, "paid_date": "2026-03-14"}

    def test_neither_uses_full_statement(self):
        plan = InvoiceUpdatePlan.build(3, set(), on=self.on)
        both = InvoiceUpdatePlan.build(3, {"amt", "paid"}, on=self.on)

        assert plan.kind is InvoiceUpdateKind.NEITHER
        assert plan.statement == both.statement
        assert plan.params == {"id": 3, "amt": None, "paid": None, "paid_date": None}

    def test_paid_date_for(self):
        assert paid_date_for(True, self.on) == self.on
        assert paid_date_for(False, self.on) is None
        assert paid_date_for(None, self.on) is None
        assert paid_date_for(True) == date.today()


class TestPaymentTransitionLog:
    """Tests for the audit events emitted on paid state changes."""

    after = {"id": 1, "comp_code": "abc", "paid": True, "paid_date": date(2026, 3, 14)}

    def test_unpaid_to_paid(self):
        with capture_logs() as logs:
            log_payment_transition({"paid": False}, self.after)

        assert [e["event"] for e in logs] == ["invoice_paid"]
        assert logs[0]["paid_date"] == "2026-03-14"

    def test_paid_to_unpaid(self):
        after = {**self.after, "paid": False, "paid_date": None}

        with capture_logs() as logs:
            log_payment_transition({"paid": True}, after)

        assert [e["event"] for e in logs] == ["invoice_unpaid"]
        assert logs[0]["paid_date"] is None

    def test_same_state_is_silent(self):
        with capture_logs() as logs:
            log_payment_transition({"paid": True}, self.after)

        assert logs == []
