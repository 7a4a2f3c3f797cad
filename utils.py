# utils.py
import logging


def configure_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def explain_metrics(metrics: dict) -> dict:
    """
    Generate human-readable explanations for each function's metrics.

    Args:
        metrics (dict): Dictionary of metrics per function:
            {
              "foo": {"cyclomatic_complexity": 3, "nesting_depth": 2, "statements": 7},
              ...
            }

    Returns:
        dict: {function_name: explanation_string}
    """
    explanations = {}

    for func, data in metrics.items():
        cc = data.get("cyclomatic_complexity", 1)
        nesting = data.get("nesting_depth", 0)
        stmts = data.get("statements", 0)

        if cc <= 5:
            cc_text = "low (easy to follow)"
        elif cc <= 10:
            cc_text = "moderate (some branching)"
        else:
            cc_text = "high (many paths, consider splitting)"

        if nesting <= 2:
            nesting_text = "shallow nesting"
        elif nesting <= 4:
            nesting_text = "moderate nesting"
        else:
            nesting_text = "deep nesting (harder to follow)"

        explanation = (
            f"Function `{func}()` has cyclomatic complexity **{cc}** ({cc_text}), "
            f"maximum if-nesting depth **{nesting}** ({nesting_text}), and **{stmts}** "
            f"straight-line statement{'s' if stmts != 1 else ''}. "
        )

        if cc > 10 or nesting > 4:
            explanation += "The flowchart for this function will be large."

        explanations[func] = explanation

    return explanations
