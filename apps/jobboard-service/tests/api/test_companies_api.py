from jobboard.db import models


def test_list_companies_returns_all(client, make_company):
    for _ in range(5):
        make_company()
    r = client.get("/companies")
    assert r.status_code == 200
    assert len(r.json()) == 5


def test_create_company_with_valid_properties(client, payloads):
    payload = payloads.company()
    r = client.post("/companies", json=payload)
    assert r.status_code == 201, r.text
    body = r.json()
    assert "id" in body
    assert body["name"] == payload["name"]
    assert body["bio"] == payload["bio"]
    assert body["email"] == payload["email"]
    assert body["website"] == payload["website"]
    assert "createdAt" in body
    assert "updatedAt" in body


def test_create_company_without_name_is_rejected(client):
    r = client.post("/companies", json={"bio": "some bio", "email": "email@company.com", "website": "company.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "name é obrigatório"


def test_create_company_with_only_name(client):
    r = client.post("/companies", json={"name": "Monsters Inc."})
    assert r.status_code == 201
    body = r.json()
    assert body["bio"] is None
    assert body["email"] is None
    assert body["website"] is None


def test_get_company_by_id_includes_jobs(client, make_company, make_job):
    company = make_company()
    job = make_job(company=company)
    make_job()  # belongs to another company

    r = client.get(f"/companies/{company.id}")
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == company.id
    assert body["name"] == company.name
    assert body["bio"] == company.bio
    assert body["email"] == company.email
    assert body["website"] == company.website
    assert [j["id"] for j in body["jobs"]] == [job.id]
    assert body["jobs"][0]["companyId"] == company.id


def test_get_unknown_company_returns_404(client):
    r = client.get("/companies/77")
    assert r.status_code == 404
    assert r.json()["message"] == "Empresa não encontrada"


def test_update_company_keeps_fields_not_sent(client, make_company):
    company = make_company()
    r = client.put(
        f"/companies/{company.id}",
        json={"name": "Monsters Inc.", "email": "email@monstersinc.com"},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["name"] == "Monsters Inc."
    assert body["email"] == "email@monstersinc.com"
    assert body["bio"] == company.bio
    assert body["website"] == company.website


def test_update_unknown_company_returns_404(client):
    r = client.put("/companies/5", json={"name": "Monsters Inc."})
    assert r.status_code == 404
    assert r.json()["message"] == "Empresa não encontrada"


def test_update_company_with_blank_name_is_rejected(client, make_company):
    company = make_company()
    r = client.put(f"/companies/{company.id}", json={"name": ""})
    assert r.status_code == 400
    assert r.json()["message"] == "name é obrigatório"


def test_delete_company(client, make_company, db_session):
    company = make_company()
    r = client.delete(f"/companies/{company.id}")
    assert r.status_code == 204
    assert r.content == b""
    assert db_session.query(models.Company).filter(models.Company.id == company.id).first() is None


def test_delete_company_removes_its_jobs_and_applications(
    client, make_company, make_job, make_candidate, apply, db_session
):
    company = make_company()
    job = make_job(company=company)
    other_job = make_job()
    candidate = make_candidate()
    apply(job, candidate)
    apply(other_job, candidate)

    r = client.delete(f"/companies/{company.id}")
    assert r.status_code == 204
    assert db_session.query(models.Job).filter(models.Job.company_id == company.id).count() == 0
    applications = db_session.query(models.JobCandidate).all()
    assert [(a.job_id, a.candidate_id) for a in applications] == [(other_job.id, candidate.id)]


def test_delete_unknown_company_returns_404(client):
    r = client.delete("/companies/3")
    assert r.status_code == 404
    assert r.json()["message"] == "Empresa não encontrada"
