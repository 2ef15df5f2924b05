"""
Singular/plural agreement for party and advocate wording.

Court documents switch between "I/my/me" and "We/our/us", "Plaintiff" and
"Plaintiffs", "the said Advocate" and "the said Advocates" depending on how
many people they speak for. Everything that decides those forms lives here.
"""

import re
from collections import namedtuple

Pronouns = namedtuple("Pronouns", ["subject", "possessive", "objective"])

AdvocateLabel = namedtuple("AdvocateLabel", ["label", "label_lower", "prefix", "is_plural"])

IRREGULAR_PLURALS = {
    "party": "parties",
    "opposite party": "opposite parties",
    "attorney": "attorneys",
    "company": "companies",
    "entity": "entities",
    "accused": "accused",
}

# Case-type code -> (applicant-side label, opposite-side label)
SIDE_LABELS = {
    "OS": ("Plaintiff", "Defendant"),
    "CS": ("Plaintiff", "Defendant"),
    "OP": ("Petitioner", "Respondent"),
    "WP": ("Petitioner", "Respondent"),
    "CRP": ("Petitioner", "Respondent"),
    "BAIL APPL.": ("Petitioner", "Respondent"),
    "RFA": ("Appellant", "Respondent"),
    "RSA": ("Appellant", "Respondent"),
    "FAO": ("Appellant", "Respondent"),
    "WA": ("Appellant", "Respondent"),
    "CC": ("Complainant", "Accused"),
    "ST": ("Complainant", "Accused"),
    "MC": ("Petitioner", "Respondent"),
}
DEFAULT_SIDE_LABELS = ("Plaintiff", "Defendant")


def pronouns(party_count):
    """First-person pronouns for `party_count` executants."""
    if party_count > 1:
        return Pronouns("We", "our", "us")
    return Pronouns("I", "my", "me")


def _match_first_letter_case(source, word):
    if source.istitle():
        return word.title()
    if source[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def pluralize(role):
    """
    Plural of a role word. Irregular table first, then consonant+y -> ies,
    then s/x/z/ch/sh -> es, otherwise +s. The capitalisation of `role`
    (Title Case, or just a capital first letter) is kept.
    """
    if not role:
        return role
    irregular = IRREGULAR_PLURALS.get(role.lower())
    if irregular:
        return _match_first_letter_case(role, irregular)
    if re.search(r"[^aeiou]y$", role, re.IGNORECASE):
        return role[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", role, re.IGNORECASE):
        return role + "es"
    return role + "s"


def role_label(role, count):
    return pluralize(role) if count > 1 else role


def side_labels(case_type):
    """
    Cause-title labels for a case type code such as "OS", "OP(MV)" or
    "RFA - Regular First Appeal".
    """
    code = (case_type or "").strip().upper()
    code = code.split(" - ")[0].strip()
    if code in SIDE_LABELS:
        return SIDE_LABELS[code]
    base = re.split(r"[\s(]", code, maxsplit=1)[0]
    return SIDE_LABELS.get(base, DEFAULT_SIDE_LABELS)


def format_name_list(names):
    """'A', 'A and B', 'A, B, and C'."""
    names = [n for n in names if n]
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + f", and {names[-1]}"


###############################################################################
#  ADVOCATES
###############################################################################
def parse_advocates(advocate_names):
    if not advocate_names:
        return []
    return [name.strip() for name in advocate_names.split(",") if name.strip()]


def has_multiple_advocates(advocate_names):
    """
    Heuristic: a comma, or a standalone "and" / " & ", means more than one
    advocate, unless the text mentions "Associates" (a firm name).

    Known false positive: a firm called "Menon and Pillai" without the word
    "Associates" reads as two advocates. Pass a comma separated list of
    individual names to avoid relying on this.
    """
    if not advocate_names:
        return False
    if "," in advocate_names:
        return True
    is_firm = "associates" in advocate_names.lower()
    if re.search(r"\band\b", advocate_names, re.IGNORECASE) and not is_firm:
        return True
    if " & " in advocate_names and not is_firm:
        return True
    return False


def advocate_label(advocate_names):
    if has_multiple_advocates(advocate_names):
        return AdvocateLabel("Advocates", "advocates", "the said Advocates", True)
    return AdvocateLabel("Advocate", "advocate", "the said Advocate", False)


def format_advocate_names(advocate_names):
    return format_name_list(parse_advocates(advocate_names))
