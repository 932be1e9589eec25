from multisort.core.models import Direction

DIRECTION_ALIASES = {
    "asc": Direction.ASC,
    "ascending": Direction.ASC,
    "up": Direction.ASC,
    "desc": Direction.DESC,
    "descending": Direction.DESC,
    "down": Direction.DESC,
}

KEY_HELP_TEXT = (
    "Sort key as FIELD[:DIRECTION], repeat for tie-breakers:\n"
    "  FIELD      : record field, dotted for nested values (owner.name, tags.0)\n"
    "  DIRECTION  : asc | ascending | up | desc | descending | down (default: asc)\n"
    "Example    : %(prog)s -i people.json -k age:desc -k name\n"
)

EPILOG_TEXT = """
Examples:
  Sort records by a single field
  %(prog)s -i ~/data/people.json -k age

  Oldest first, then alphabetically by name
  %(prog)s -i ~/data/people.json -k age:desc -k name

  Sort nested values and write the result to a file
  %(prog)s -i ~/data/orders.json -k customer.city -k total:desc -o sorted.json

  Read from stdin, fail if a record lacks a key
  cat people.json | %(prog)s -i - -k name --strict-keys
"""
