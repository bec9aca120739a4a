"""Grammar for canonical paths, distinguished names, and names

Each language is built up from small regular expression fragments, in the same
manner as the RFC grammars these formats are loosely derived from. Nothing here
is anchored; see :func:`dnpath.utils.re_anchor`.
"""

## Canonical paths

label = r'\w+'
domain = label + r'(?:\.' + label + r')*'
segments = r'/.*'

# same language as (/.*)*, without the nested repetition
canonicalPath = domain + r'(?:' + segments + r')?'

## Distinguished names

ALLOWED_CHARS_DESC = 'space, letters, digits, underscore, hyphen, parentheses'

valuechar = r'[ \w()-]'
value = valuechar + r'+'

commonName = r'CN=' + value
organizationalUnit = r'OU=' + value
domainComponent = r'DC=' + value

distinguishedName = (
    r'(?:' + commonName + r',)?' +
    r'(?:' + organizationalUnit + r',)*' +
    domainComponent + r'(?:,' + domainComponent + r')+'
)

domainComponents = domainComponent + r'(?:,' + domainComponent + r')*'

# split points used once a DN is known to be valid
dcSeparator = r',?DC='
ouSeparator = r',?OU='
cnPrefix = r'CN='

## Names

nameSeparator = r' +'
# for search(); same strings as \w+ +\w+ without backtracking over long words
name = r'\w' + nameSeparator + r'\w'
