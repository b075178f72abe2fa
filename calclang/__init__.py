from calclang._describe import describe, token_text
from calclang._scanner import Scanner, ScanState, tokenize
from calclang._settings import OverflowPolicy, ScannerSettings
from calclang._token import KEYWORDS, Token, TokenType
