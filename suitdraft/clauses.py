"""
Boilerplate legal prose, one template per clause.

Assemblers never concatenate legal wording themselves; they pick a template
id and supply its arguments, so a change of wording touches this table only.
"""

CLAUSES = {
    # --- vakalathnama / memo --------------------------------------------------
    "vakalath.executants": (
        "{subject}, {executants}, the {label} in the above {case_type}, do hereby appoint and retain"
    ),
    "vakalath.authority": (
        "{advocate_label} to appear for {objective} in the above suit, appeal or petition and to "
        "conduct and prosecute or defend the same and all proceedings that may be taken in respect "
        "of any application for execution of any decree or order passed therein. {subject} empower "
        "{advocate_prefix} to compromise any suit or proceeding on {possessive} behalf and to appear "
        "in all miscellaneous proceedings in the above suit or matter till all decrees or orders are "
        "fully satisfied or adjusted, to produce in court {possessive} money, documents or valuable "
        "securities, to apply for their return and to receive back the same, to apply for and obtain "
        "copies of all documents in the record of the proceedings, and to draw any moneys that may be "
        "payable to {objective} in the above suit or matter. {subject} do further empower "
        "{advocate_prefix} to file any appeal, reference or revision on any decree or order passed in "
        "the above suit or matter and to accept on {possessive} behalf service of notice of all or any "
        "appeals or petitions filed in any court of appeal, reference or revision with regard to the "
        "said suit or matter before the disposal of the same in this Honourable Court. {subject} do "
        "hereby agree that everything lawfully done by {advocate_prefix} in the conduct of the suit or "
        "matter shall be valid and binding on {objective} as if done by {objective} in person."
    ),
    "vakalath.signed": "Signed this the {date}.",
    "memo.body": (
        "Please take notice that {advocate_names}, {advocate_label_lower}, {verb} on behalf of the "
        "{label}, {parties}, in the above {case_type} and that all notices and processes in the "
        "matter may be served on {advocate_objective} at the address given below."
    ),

    # --- plaint -----------------------------------------------------------------
    "plaint.heading": "PLAINT FILED UNDER ORDER VII RULE 1 OF THE CODE OF CIVIL PROCEDURE, 1908",
    "plaint.applicant_description": (
        "The {label_lower} {is_are} {descriptions}. The address for service of notices and processes "
        "on the {label_lower} is {service_address}."
    ),
    "plaint.opposite_description": (
        "The {label_lower} {is_are} {descriptions}. The address for service of notices and processes "
        "on the {label_lower} is as shown above."
    ),
    "plaint.summary": "{summary}",
    "plaint.fact": "On {date}, {description}",
    "plaint.cause_of_action": (
        "The cause of action for the suit arose on {date} at {place}, within the jurisdiction of this "
        "Honourable Court. {description}"
    ),
    "plaint.territorial": "This Honourable Court has territorial jurisdiction to try the suit. {text}",
    "plaint.pecuniary": "This Honourable Court has pecuniary jurisdiction to try the suit. {text}",
    "plaint.subject_matter": (
        "The subject matter of the suit is within the competence of this Honourable Court. {text}"
    ),
    "plaint.valuation": (
        "The market value of the subject matter of the suit is {market_value} and the relief is "
        "valued at {relief_value} for the purposes of court fee and jurisdiction. A court fee of "
        "{court_fee} is paid under the Kerala Court Fees and Suits Valuation Act, 1959. {calculation}"
    ),
    "plaint.schedules": (
        "The properties and items involved in the suit are described in Schedule {schedule_names} "
        "appended hereto."
    ),
    "plaint.prayer": (
        "The {label_lower} therefore {pray} that this Honourable Court may be pleased to pass a "
        "decree in favour of the {label_lower} and against the {opposite_lower}:"
    ),
    "plaint.prayer_close": (
        "and grant such other reliefs as this Honourable Court deems fit and proper in the "
        "circumstances of the case, with costs of the suit."
    ),
    "plaint.verification": (
        "{subject}, {names}, the {label_lower} in the above suit, do hereby declare that the facts "
        "stated in paragraphs 1 to {last_paragraph} above are true to the best of {possessive} "
        "knowledge, information and belief, and that {subject_lower} have not suppressed any material "
        "facts. Verified on this the {date} at {place}."
    ),

    # --- affidavits --------------------------------------------------------------
    "affidavit.deponent": (
        "I, {description}, do hereby solemnly affirm and state as follows:"
    ),
    "affidavit.capacity_single": (
        "I am the {label_lower} in the above suit. I know the facts of the case and I am competent "
        "to swear to this affidavit."
    ),
    "affidavit.capacity_multiple": (
        "I am the {position} {label_lower} in the above suit. I know the facts of the case and I am "
        "competent to swear to this affidavit on my own behalf and on behalf of the other "
        "{label_plural_lower}, who have authorised me to do so."
    ),
    "affidavit.plaint_true": (
        "The plaint in the above suit has been drafted on my instructions. The facts stated therein "
        "are true and correct to the best of my knowledge, information and belief."
    ),
    "affidavit.documents": (
        "The documents produced along with the plaint, as shown in the list of documents, are true "
        "copies of their originals."
    ),
    "affidavit.closing": (
        "All the facts stated above are true to the best of my knowledge, information and belief."
    ),
    "affidavit.sworn": (
        "Solemnly affirmed and signed before me by the deponent, who is personally known to me, on "
        "this the {date} at {place}."
    ),

    # --- interlocutory applications ------------------------------------------------
    "ia.heading": "PETITION FILED UNDER {purpose}",
    "ia.facts_reference": (
        "The petitioner is the {label_lower} in the above suit. The facts of the case are stated in "
        "the plaint and the accompanying affidavit and are not repeated here for brevity."
    ),
    "ia.grounds_intro": "The petition is filed on the following among other grounds:",
    "ia.prayer": (
        "It is therefore prayed that this Honourable Court may be pleased to {relief} pending "
        "disposal of the suit, in the interest of justice."
    ),
    "ia.affidavit_capacity": (
        "I am the petitioner in {ia_number} in the above suit and the {label_lower} therein. I know "
        "the facts of the case."
    ),
    "ia.affidavit_petition_true": (
        "The averments in the accompanying petition are true and correct. The petition may be "
        "allowed, failing which I will be put to irreparable injury and hardship."
    ),
    "ia.none": "No interlocutory applications are filed along with the suit.",
    "ia.no_affidavits": "No interlocutory application filed along with the suit requires an affidavit.",

    # --- certificates, synopsis ------------------------------------------------------
    "valuation.certificate": (
        "Certified that the suit is valued correctly and that the proper court fee of {court_fee} "
        "has been paid on the plaint under the Kerala Court Fees and Suits Valuation Act, 1959."
    ),
    "synopsis.authority": "{case_name}, {citation} ({court}, {year})",
    "placeholder.body": (
        "The {name} for the above case will be prepared in the standard draft layout. A court "
        "template for this document is not yet available."
    ),
}


def clause(template_id, **arguments):
    """Fill the named template, e.g. clause('vakalath.signed', date='1st day of May, 2025')."""
    return CLAUSES[template_id].format(**arguments)
