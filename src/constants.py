import re

PROMPT = "$ "
CONTINUATION_PROMPT = ". "

# $NAME references: a letter or underscore, then letters, digits or
# underscores (Unicode, as str.isalpha/isalnum). Braces are not recognised.
VAR_REF_RX = re.compile(r"\$([^\W\d]\w*)")

# Characters a backslash may escape inside double quotes.
DQUOTE_ESCAPABLE = set('$`\\"')
# An escaped one of these makes the whole word exempt from expansion.
EXPANSION_CHARS = set("$`")

LOG_LEVEL_ENV = "MINISH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
