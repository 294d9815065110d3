from dataclasses import asdict

from flask import Flask, jsonify, request

from mortgage_calc.costs import estimate_lmi, estimate_stamp_duty, loan_to_value_ratio
from mortgage_calc.data_models import InvestmentInputs, LoanParameters
from mortgage_calc.engine import chart_data, generate_schedule, mortgage_summary, offset_benefits
from mortgage_calc.exceptions import InvalidInputError
from mortgage_calc.investment import analyze_investment
from mortgage_calc.strategies import compare_strategies
from mortgage_calc.tables import FREQUENCIES
from mortgage_calc.utils import to_decimal, to_jsonable
from mortgage_calc_web.config import Config


def _payload() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def _required(data: dict, name: str):
    value = data.get(name)
    if value is None or value == "":
        raise InvalidInputError(f"Missing required field: {name}")
    return value


def _optional(data: dict, name: str):
    value = data.get(name)
    return None if value in (None, "") else value


def _form_to_loan_parameters(data: dict) -> LoanParameters:
    return LoanParameters(
        loan_amount=_required(data, "loan_amount"),
        annual_interest_rate_pct=_required(data, "annual_interest_rate_pct"),
        term_years=_required(data, "term_years"),
        property_value=_optional(data, "property_value"),
        offset_balance=_optional(data, "offset_balance") or 0,
    )


def _form_to_investment_inputs(data: dict) -> InvestmentInputs:
    return InvestmentInputs(
        property_price=_required(data, "property_price"),
        deposit=_required(data, "deposit"),
        weekly_rental_income=_required(data, "weekly_rental_income"),
        weekly_expenses=_optional(data, "weekly_expenses") or 0,
        annual_interest_rate_pct=_required(data, "annual_interest_rate_pct"),
        term_years=_optional(data, "term_years") or 30,
        marginal_tax_rate_pct=_required(data, "marginal_tax_rate_pct"),
    )


def _frequency(data: dict) -> int:
    name = str(data.get("frequency") or "monthly").lower()
    if name not in FREQUENCIES:
        raise InvalidInputError(f"Unknown frequency: {name}")
    return FREQUENCIES[name]


def _step(data: dict) -> int:
    try:
        return int(_optional(data, "step") or 12)
    except (TypeError, ValueError):
        raise InvalidInputError("step must be a whole number") from None


def _schedule_for_view(schedule: list, show_full_schedule: bool, preview_rows: int):
    """Return the rows to send and how many were left out."""
    if show_full_schedule or len(schedule) <= preview_rows:
        return schedule, 0
    return schedule[:preview_rows], len(schedule) - preview_rows


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    @app.errorhandler(InvalidInputError)
    def handle_invalid_input(exc):
        app.logger.info("Rejected %s: %s", request.path, exc)
        return jsonify({"error": str(exc)}), 400

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok", "asset_version": app.config["ASSET_VERSION"]})

    @app.post("/api/summary")
    def summary():
        params = _form_to_loan_parameters(_payload())
        response = {"summary": asdict(mortgage_summary(params))}
        if params.offset_balance > 0:
            response["offset_benefits"] = asdict(offset_benefits(params))
        return jsonify(to_jsonable(response))

    @app.post("/api/schedule")
    def schedule():
        data = _payload()
        params = _form_to_loan_parameters(data)
        full_schedule = generate_schedule(
            params,
            _optional(data, "extra_payment") or 0,
            _frequency(data),
        )
        show_full_schedule = str(data.get("show_full_schedule", "")).lower() in ("1", "true")
        rows, truncated = _schedule_for_view(
            full_schedule, show_full_schedule, app.config["SCHEDULE_PREVIEW_ROWS"]
        )
        response = {
            "periods": len(full_schedule),
            "schedule": [asdict(entry) for entry in rows],
        }
        if truncated:
            response["truncated"] = truncated
        return jsonify(to_jsonable(response))

    @app.post("/api/chart")
    def chart():
        data = _payload()
        params = _form_to_loan_parameters(data)
        extra = to_decimal(_optional(data, "extra_payment") or 0, "extra_payment")
        step = _step(data)
        response = {"points": [asdict(p) for p in chart_data(params, 0, step)]}
        # With an extra repayment the baseline is kept for side-by-side plotting.
        if extra > 0:
            response["extra_points"] = [asdict(p) for p in chart_data(params, extra, step)]
        return jsonify(to_jsonable(response))

    @app.post("/api/strategies")
    def strategies():
        params = _form_to_loan_parameters(_payload())
        scenarios = compare_strategies(params)
        return jsonify(to_jsonable({"scenarios": [asdict(s) for s in scenarios]}))

    @app.post("/api/costs")
    def costs():
        data = _payload()
        loan_amount = to_decimal(_required(data, "loan_amount"), "loan_amount")
        property_value = to_decimal(_required(data, "property_value"), "property_value")
        if property_value <= 0:
            raise InvalidInputError("Property value must be positive")
        lmi = estimate_lmi(loan_amount, property_value)
        stamp_duty = estimate_stamp_duty(property_value)
        return jsonify(
            to_jsonable(
                {
                    "lvr": loan_to_value_ratio(loan_amount, property_value),
                    "lmi_amount": lmi,
                    "stamp_duty": stamp_duty,
                    "total_upfront": lmi + stamp_duty,
                }
            )
        )

    @app.post("/api/investment")
    def investment():
        inputs = _form_to_investment_inputs(_payload())
        return jsonify(to_jsonable({"analysis": asdict(analyze_investment(inputs))}))

    return app


app = create_app()


if __name__ == "__main__":
    print("Starting Mortgage Calculator web API...")
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
