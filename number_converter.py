import logging
import os
from flask import Flask, render_template_string, request

from conversion import MAX_INPUT_LENGTH, Base, InvalidInput, convert, error_message

app = Flask(__name__)
logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(levelname)s - %(message)s')
PORT = int(os.environ.get("BINCALC_PORT", 5001))
DEBUG = os.environ.get("BINCALC_DEBUG", "1") == "1"

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <title>Binary Step Converter</title>
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Roboto&display=swap');
        body { font-family: 'Roboto', sans-serif; margin: 0; padding: 0;
            background: linear-gradient(135deg, #0f172a, #111827); min-height: 100vh;
            color: #f1f1f1; display: flex; justify-content: center; align-items: center; }
        .container { background: rgba(0,0,0,0.75); border-radius: 12px; box-shadow: 0 8px 24px rgba(0,0,0,0.3);
            width: 700px; padding: 30px 40px 40px 40px; box-sizing: border-box; }
        h1 { margin-bottom: 10px; font-weight: 700; font-size: 2.4rem; letter-spacing: 1.2px; text-align: center; text-shadow: 2px 2px 6px #222; }
        label { display: block; margin-top: 20px; font-weight: 600; user-select: none; letter-spacing: 0.05em; }
        input[type=text], button {
            margin-top: 8px; padding: 12px 15px; font-size: 1rem; border-radius: 8px; border: none;
            width: 100%; outline: none; box-sizing: border-box; transition: 0.3s; font-family: monospace;
        }
        input[type=text]:focus { box-shadow: 0 0 8px #a855f7; background-color: #fff; color: #333; }
        button { background: #7c3aed; color: #fff; cursor: pointer; font-weight: 700; letter-spacing: 0.1em;
            transition: background-color 0.3s ease; }
        button:hover { background: #06b6d4; }
        .buttons { display: flex; gap: 12px; margin-top: 20px; }
        .hint { color: #9ca3af; font-size: 0.9rem; margin-top: 6px; }
        .result, .error {
            margin-top: 25px; padding: 15px; border-radius: 8px; box-sizing: border-box;
            font-family: 'Courier New', Courier, monospace; white-space: pre-wrap; word-wrap: break-word;
            font-size: 1rem;
        }
        .result { background: #222; color: #a8ffc7; line-height: 1.35; box-shadow: inset 0 0 10px #2ecc71; }
        .error { background: #ff4c4c; color: #fff; font-weight: bold; box-shadow: inset 0 0 10px #ff0000; }
        ol.steps { margin-top: 15px; padding-left: 24px; line-height: 1.6; font-family: monospace; }
        ol.steps span.partial { color: #67e8f9; margin-left: 12px; }
        footer { user-select: none; font-size: 0.9rem; text-align: center; color: #ccc; margin-top: 30px; }
        @media(max-width: 780px) {
            .container { width: 95vw; padding: 25px 20px; }
            input[type=text], button { font-size: 0.9rem; }
            h1 { font-size: 1.8rem; }
        }
    </style>
</head>
<body>
<div class="container">
    <h1>Binary Step Converter</h1>
    <form method="post" novalidate>
        <input type="hidden" name="base" value="{{ base.value }}" />
        <label for="number">Enter {{ base.label }} Number:</label>
        <input type="text" name="number" id="number" value="{{ number|default('') }}" maxlength="{{ max_length }}"
               placeholder="Enter {{ base.value }} number..." autofocus />
        <div class="hint">{{ hint }}</div>
        <div class="buttons">
            <button type="submit" name="action" value="convert">Convert</button>
            <button type="submit" name="action" value="switch">Switch to {{ base.other.label }}</button>
            <button type="submit" name="action" value="clear">Clear All</button>
        </div>
    </form>
    {% if error %}
        <div class="error">{{ error }}</div>
    {% endif %}
    {% if result %}
        <h2>{{ result.base.other.label }} Result:</h2>
        <div class="result"><strong id="result-value">{{ result.value }}</strong></div>
        <button type="button" id="copy-button">Copy</button>
        <h2>Steps:</h2>
        <ol class="steps">
            {% for step in result.steps %}
                <li>{{ step.operation }}<span class="partial">{{ step.partial }}</span></li>
            {% endfor %}
        </ol>
        {% if result.base.value == 'decimal' %}
            <div class="hint">Read the remainders from the last step back to the first.</div>
        {% endif %}
    {% endif %}
</div>
<script>
    document.addEventListener('DOMContentLoaded', function() {
        const copyButton = document.getElementById('copy-button');
        if (!copyButton) return;
        copyButton.addEventListener('click', async function() {
            await navigator.clipboard.writeText(document.getElementById('result-value').textContent);
            copyButton.textContent = 'Copied!';
            setTimeout(() => copyButton.textContent = 'Copy', 2000);
        });
    });
</script>
<footer>
    &copy; 2025 Binary Step Converter
</footer>
</body>
</html>
"""

def validate_and_parse(num_str: str, base: Base):
    try:
        return convert(num_str, base), None
    except InvalidInput as e:
        return None, str(e)

def parse_base(raw) -> Base:
    try:
        return Base(raw or Base.DECIMAL.value)
    except ValueError:
        logging.warning(f"Unknown base {raw!r}, falling back to decimal")
        return Base.DECIMAL

@app.route("/", methods=["GET", "POST"])
def index():
    context = {
        "error": None,
        "result": None,
        "number": "",
        "base": Base.DECIMAL,
        "max_length": MAX_INPUT_LENGTH,
    }
    if request.method == "POST":
        base = parse_base(request.form.get("base"))
        action = request.form.get("action", "convert")
        if action == "switch":
            base = base.other
        context["base"] = base
        if action == "convert":
            context["number"] = request.form.get("number", "")
            try:
                context["result"], context["error"] = validate_and_parse(context["number"], base)
            except Exception as e:
                logging.error(f"An unhandled exception occurred: {e}", exc_info=True)
                context["error"] = "A critical server error occurred. Please try again."
    context["hint"] = error_message(context["base"])
    return render_template_string(HTML_TEMPLATE, **context)

if __name__ == "__main__":
    app.run(debug=DEBUG, port=PORT)
