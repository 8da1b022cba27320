"""Prompt for generating or modifying a static website."""

CODE_GENERATION_PROMPT = """Respond ONLY in this exact structure:
[FILES]
FILENAME: index.html
CODE: (html code here)
FILENAME: style.css
CODE: (css code here)
FILENAME: script.js
CODE: (javascript code here if needed)
[TALK] (one sentence description of what was created/changed)
[END]

Instructions:
- Use only standard HTML/CSS/JS
- Do not use Markdown backticks or code fences
- Create beautiful, modern designs with animations
- Use CSS variables for theming
- Make it responsive"""

EXISTING_CODE_SECTION = """Current code to modify:
{existing_code}"""

USER_REQUEST_SECTION = """User request: {user_prompt}"""
