"""Tests for certification extraction."""

from cvparse.extractors.certifications import extract_certifications, is_date_line


def test_name_issuer_credential_and_date():
    text = "\n".join([
        "Certified Kubernetes Administrator (CKA)",
        "The Linux Foundation",
        "Credential ID: LF-123",
        "Issued Jan 2023",
    ])
    certs = extract_certifications(text)

    assert len(certs) == 1
    cert = certs[0]
    assert cert.name == "Certified Kubernetes Administrator (CKA)"
    assert cert.issuer == "The Linux Foundation"
    assert cert.credential_id == "LF-123"
    assert cert.date == "Jan 2023"
    assert cert.expiration_date == ""


def test_two_dates_on_the_name_line():
    certs = extract_certifications("Scrum Master Jan 2020 - Jan 2022")
    assert len(certs) == 1
    assert certs[0].name == "Scrum Master"
    assert (certs[0].date, certs[0].expiration_date) == ("Jan 2020", "Jan 2022")


def test_labelled_issuer():
    certs = extract_certifications("Google Data Analytics\nIssued by: Coursera")
    assert [(c.name, c.issuer) for c in certs] == [("Google Data Analytics", "Coursera")]


def test_several_certifications_in_one_block():
    text = "CompTIA Security+\nIssued Jun 2021\nAWS Certified Developer\nAmazon Web Services"
    certs = extract_certifications(text)

    assert [c.name for c in certs] == ["CompTIA Security+", "AWS Certified Developer"]
    assert certs[0].date == "Jun 2021"
    assert certs[0].issuer == ""
    assert certs[1].issuer == "Amazon Web Services"


def test_blocks_are_separate_certifications():
    certs = extract_certifications("PMP\nProject Management Institute\n\nCCNA\nCisco")
    assert [(c.name, c.issuer) for c in certs] == [
        ("PMP", "Project Management Institute"),
        ("CCNA", "Cisco"),
    ]


def test_sample_certification(sample_resume_text):
    body = sample_resume_text.split("CERTIFICATIONS\n", 1)[1]
    certs = extract_certifications(body)
    assert len(certs) == 1
    assert certs[0].name == "AWS Certified Solutions Architect"
    assert certs[0].issuer == "Amazon Web Services"
    assert certs[0].date == "Mar 2022"


def test_missing_values_are_empty_strings():
    cert = extract_certifications("Six Sigma Green Belt")[0]
    assert cert.as_dict() == {
        "name": "Six Sigma Green Belt",
        "issuer": "",
        "date": "",
        "expiration_date": "",
        "credential_id": "",
    }


def test_is_date_line():
    assert is_date_line("Expires: March 2024")
    assert is_date_line("Jan 2020 - Jan 2023")
    assert not is_date_line("Cloud Practitioner Jan 2020")
    assert not is_date_line("Amazon Web Services")


def test_empty_input():
    assert extract_certifications("") == []
