# contactform/templates.py
from contactform.schemas import FormResult

PAGE_STYLE = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
         min-height: 100vh; display: flex; justify-content: center; align-items: center; padding: 20px; }
  .container { background: #fff; border-radius: 10px; box-shadow: 0 10px 40px rgba(0,0,0,.2); max-width: 600px; width: 100%; padding: 40px; }
  h1 { color: #333; margin-bottom: 10px; font-size: 28px; }
  .subtitle { color: #666; margin-bottom: 30px; font-size: 14px; }
  .form-group { margin-bottom: 20px; }
  label { display: block; margin-bottom: 8px; color: #333; font-weight: 500; font-size: 14px; }
  input[type="text"], input[type="email"], textarea { width: 100%; padding: 12px; border: 1px solid #ddd; border-radius: 5px; font-family: inherit; font-size: 14px; }
  input:focus, textarea:focus { outline: none; border-color: #667eea; box-shadow: 0 0 0 3px rgba(102,126,234,.1); }
  textarea { resize: vertical; min-height: 150px; }
  button { width: 100%; padding: 12px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: #fff; border: none;
           border-radius: 5px; font-size: 16px; font-weight: 600; cursor: pointer; }
  .alert { padding: 15px; border-radius: 5px; margin-bottom: 20px; font-size: 14px; }
  .alert-success { background-color: #d4edda; color: #155724; border: 1px solid #c3e6cb; }
  .alert-error { background-color: #f8d7da; color: #721c24; border: 1px solid #f5c6cb; }
"""


def render_banner(result: FormResult) -> str:
    if not result.status or not result.message:
        return ""
    # message is built from fixed strings and sanitized fields only
    return f'<div class="alert alert-{result.status}">{result.message}</div>'


def render_contact_page(result: FormResult) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Contact Us</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<div class="container">
  <h1>Get in Touch</h1>
  <p class="subtitle">We'd love to hear from you. Send us a message and we'll respond as soon as possible.</p>
  {render_banner(result)}
  <form method="POST" action="">
    <div class="form-group">
      <label for="name">Name *</label>
      <input type="text" id="name" name="name" required>
    </div>
    <div class="form-group">
      <label for="email">Email *</label>
      <input type="email" id="email" name="email" required>
    </div>
    <div class="form-group">
      <label for="subject">Subject *</label>
      <input type="text" id="subject" name="subject" required>
    </div>
    <div class="form-group">
      <label for="message">Message *</label>
      <textarea id="message" name="message" required></textarea>
    </div>
    <button type="submit">Send Message</button>
  </form>
</div>
</body>
</html>
"""
