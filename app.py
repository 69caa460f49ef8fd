"""
Web front end: upload a WhatsApp chat export and browse it
organized by year and category.
"""
from flask import Flask, request, render_template, jsonify

from categorizer import load_keyword_rules
from config import Config
from errors import ChatFormatError
from grouper import count_by_category, parse_and_group, summarize_groups
from html_renderer import generate_complete_html
from link_titles import collect_blog_titles

# Initialize Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = Config.MAX_UPLOAD_MB * 1024 * 1024

# Keyword rules are loaded once at startup
KEYWORD_RULES = load_keyword_rules(Config.KEYWORDS_FILE)


@app.route('/', methods=['GET', 'POST'])
def index():
    if request.method == 'GET':
        return render_template('index.html', fetch_titles=Config.FETCH_TITLES)

    # Check if a file was uploaded
    if 'file' not in request.files:
        return render_template('index.html', error="No file selected"), 400

    file = request.files['file']

    # If user submits without selecting a file
    if file.filename == '':
        return render_template('index.html', error="No file selected"), 400

    chat_text = file.read().decode('utf-8', errors='replace')
    strict = request.args.get('strict') == '1'

    try:
        messages, grouped = parse_and_group(chat_text, KEYWORD_RULES, strict=strict)
    except ChatFormatError as e:
        app.logger.error(f"Error processing file {file.filename}: {e}")
        if request.args.get('format') == 'json':
            return jsonify({'error': str(e)}), 400
        return render_template('index.html', error=f"Error processing file: {e}"), 400

    app.logger.info(f"Parsed {len(messages)} messages from {file.filename}")

    if request.args.get('format') == 'json':
        return jsonify({
            'message_count': len(messages),
            'category_counts': count_by_category(messages),
            'summary': summarize_groups(grouped),
            'groups': grouped
        })

    link_titles = []
    if request.form.get('fetch_titles'):
        link_titles = collect_blog_titles(messages)

    return generate_complete_html(grouped, title=Config.CHAT_TITLE, link_titles=link_titles)


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.errorhandler(413)
def too_large(error):
    return render_template('index.html', error=f"File too large (limit {Config.MAX_UPLOAD_MB} MB)"), 413


if __name__ == "__main__":
    print(f"Starting server on port {Config.PORT}")
    app.run(host="0.0.0.0", port=Config.PORT)
