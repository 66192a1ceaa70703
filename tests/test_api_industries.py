"""Tests for industry endpoints."""


class TestIndustryCrud:
    """Tests for industry CRUD endpoints."""

    def test_list_industries_with_companies(self, client):
        response = client.get("/industries")

        assert response.status_code == 200
        industries = {i["code"]: i for i in response.json()["industries"]}
        assert industries["acct"]["companies"] == ["abc"]
        assert industries["food"]["companies"] == []
        assert industries["food"]["name"] == "Food Service"

    def test_get_industry(self, client):
        response = client.get("/industries/acct")

        assert response.status_code == 200
        assert response.json()["industry"] == {
            "code": "acct",
            "name": "Accounting",
            "companies": ["abc"],
        }

    def test_get_industry_not_found(self, client):
        response = client.get("/industries/tech")

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"

    def test_create_industry(self, client):
        """Test creation slugifies the code and starts with no companies."""
        response = client.post("/industries", json={"code": "Real Estate", "name": "Real Estate"})

        assert response.status_code == 201
        industry = response.json()["industry"]
        assert industry["code"] == "real-estate"
        assert industry["companies"] == []
        assert client.get("/industries/real-estate").status_code == 200

    def test_create_industry_missing_name(self, client):
        response = client.post("/industries", json={"code": "tech"})

        assert response.status_code == 500
        assert "error" in response.json()

    def test_update_industry(self, client):
        response = client.put("/industries/acct", json={"name": "Accounting & Tax"})

        assert response.status_code == 200
        industry = response.json()["industry"]
        assert industry["name"] == "Accounting & Tax"
        assert industry["companies"] == ["abc"]

    def test_update_industry_not_found(self, client):
        response = client.put("/industries/tech", json={"name": "Tech"})

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"

    def test_delete_industry(self, client):
        response = client.delete("/industries/acct")

        assert response.status_code == 200
        assert response.json() == {"status": "deleted"}
        assert client.get("/companies/abc").json()["company"]["industries"] == []

    def test_delete_industry_not_found(self, client):
        response = client.delete("/industries/tech")

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"


class TestIndustryMembership:
    """Tests for adding and removing companies in an industry."""

    def test_add_company(self, client):
        response = client.post("/industries/food/companies", json={"comp_code": "abc"})

        assert response.status_code == 201
        industry = response.json()["industry"]
        assert industry["code"] == "food"
        assert "abc" in industry["companies"]
        assert client.get("/companies/abc").json()["company"]["industries"] == [
            "Accounting", "Food Service"
        ]

    def test_add_company_industry_not_found(self, client):
        response = client.post("/industries/tech/companies", json={"comp_code": "abc"})

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"

    def test_add_company_company_not_found(self, client):
        response = client.post("/industries/food/companies", json={"comp_code": "def"})

        assert response.status_code == 404
        assert response.json()["message"] == "Company with code 'def' not found"

    def test_add_company_checks_industry_first(self, client):
        response = client.post("/industries/tech/companies", json={"comp_code": "def"})

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"

    def test_add_company_twice_fails(self, client):
        """Test re-adding an existing pair is rejected by the store."""
        response = client.post("/industries/acct/companies", json={"comp_code": "abc"})

        assert response.status_code == 500
        assert "error" in response.json()
        assert client.get("/industries/acct").json()["industry"]["companies"] == ["abc"]

    def test_remove_company(self, client):
        response = client.delete("/industries/acct/companies/abc")

        assert response.status_code == 200
        assert response.json() == {"status": "deleted"}
        assert client.get("/industries/acct").json()["industry"]["companies"] == []

    def test_remove_company_industry_not_found(self, client):
        response = client.delete("/industries/tech/companies/abc")

        assert response.status_code == 404
        assert response.json()["message"] == "Industry with code 'tech' not found"

    def test_remove_company_company_not_found(self, client):
        response = client.delete("/industries/acct/companies/def")

        assert response.status_code == 404
        assert response.json()["message"] == "Company with code 'def' not found"

    def test_remove_company_not_in_industry(self, client):
        response = client.delete("/industries/food/companies/abc")

        assert response.status_code == 404
        assert response.json()["message"] == (
            "Company with code 'abc' not found in industry with code 'food'"
        )
