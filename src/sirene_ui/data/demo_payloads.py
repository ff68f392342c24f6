"""
Upstream-shaped fixture payloads used by DemoSireneService.

Each constant mirrors the JSON body of the corresponding live endpoint:
- DEMO_COMPLETIONS: Géoplateforme /completion
- DEMO_ADDRESSES: BAN /search/ bodies keyed by the queried label
- DEMO_COMPANIES: INSEE SIRENE /siret
"""

DEMO_COMPLETIONS = {
    "status": "OK",
    "results": [
        {
            "fulltext": "12 Rue de la Paix, 75002 Paris",
            "classification": 7,
            "type": "StreetAddress",
            "city": "Paris",
            "zipcode": "75002",
            "street": "Rue de la Paix",
            "kind": "housenumber",
        },
        {
            "fulltext": "12 Rue de la Paix, 33000 Bordeaux",
            "classification": 7,
            "type": "StreetAddress",
            "city": "Bordeaux",
            "zipcode": "33000",
            "street": "Rue de la Paix",
            "kind": "housenumber",
        },
        {
            "fulltext": "Place de la Concorde, 75008 Paris",
            "classification": 7,
            "type": "StreetAddress",
            "city": "Paris",
            "zipcode": "75008",
            "kind": "street",
        },
        {
            "fulltext": "Paris",
            "classification": 5,
            "type": "PositionOfInterest",
        },
    ],
}

DEMO_ADDRESSES = {
    "12 Rue de la Paix, 75002 Paris": {
        "type": "FeatureCollection",
        "version": "draft",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [2.331289, 48.869268]},
                "properties": {
                    "label": "12 Rue de la Paix 75002 Paris",
                    "score": 0.9731,
                    "housenumber": "12",
                    "id": "75102_7022_00012",
                    "name": "12 Rue de la Paix",
                    "postcode": "75002",
                    "citycode": "75102",
                    "x": 651337.06,
                    "y": 6863262.09,
                    "city": "Paris",
                    "district": "Paris 2e Arrondissement",
                    "context": "75, Paris, Île-de-France",
                    "type": "housenumber",
                    "importance": 0.70383,
                    "street": "Rue de la Paix",
                },
            }
        ],
        "attribution": "BAN",
        "licence": "ETALAB-2.0",
        "query": "12 Rue de la Paix, 75002 Paris",
        "limit": 1,
    },
    "Place de la Concorde, 75008 Paris": {
        "type": "FeatureCollection",
        "version": "draft",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [2.321236, 48.865633]},
                "properties": {
                    "label": "Place de la Concorde 75008 Paris",
                    "score": 0.9602,
                    "id": "75108_7508",
                    "name": "Place de la Concorde",
                    "postcode": "75008",
                    "citycode": "75108",
                    "x": 650600.71,
                    "y": 6862860.45,
                    "city": "Paris",
                    "context": "75, Paris, Île-de-France",
                    "type": "street",
                    "importance": 0.7422,
                },
            }
        ],
        "attribution": "BAN",
        "licence": "ETALAB-2.0",
        "query": "Place de la Concorde, 75008 Paris",
        "limit": 1,
    },
}

DEMO_COMPANIES = {
    "header": {"statut": 200, "message": "OK", "total": 3, "debut": 0, "nombre": 3},
    "etablissements": [
        {
            "siren": "552081317",
            "nic": "00012",
            "siret": "55208131700012",
            "dateCreationEtablissement": "1954-07-01",
            "uniteLegale": {
                "denominationUniteLegale": "MAISON DE JOAILLERIE DE LA PAIX",
                "activitePrincipaleUniteLegale": "47.77Z",
            },
            "adresseEtablissement": {
                "numeroVoieEtablissement": "12",
                "typeVoieEtablissement": "RUE",
                "libelleVoieEtablissement": "DE LA PAIX",
                "codePostalEtablissement": "75002",
                "libelleCommuneEtablissement": "PARIS 2",
                "codeCommuneEtablissement": "75102",
                "identifiantAdresseEtablissement": "75102702200012_B",
            },
        },
        {
            "siren": "830145892",
            "nic": "00021",
            "siret": "83014589200021",
            "dateCreationEtablissement": "2017-06-15",
            "uniteLegale": {
                "nomUniteLegale": "MARTIN",
                "prenom1UniteLegale": "CLAIRE",
                "activitePrincipaleUniteLegale": "69.10Z",
            },
            "adresseEtablissement": {
                "numeroVoieEtablissement": "12",
                "typeVoieEtablissement": "RUE",
                "libelleVoieEtablissement": "DE LA PAIX",
                "codePostalEtablissement": "75002",
                "libelleCommuneEtablissement": "PARIS 2",
                "codeCommuneEtablissement": "75102",
                "identifiantAdresseEtablissement": "75102702200012_B",
            },
        },
        {
            "siren": "412369850",
            "nic": "00035",
            "siret": "41236985000035",
            "dateCreationEtablissement": "1997-04-02",
            "uniteLegale": {
                "denominationUniteLegale": "CONCORDE CONSEIL",
                "activitePrincipaleUniteLegale": "70.22Z",
            },
            "adresseEtablissement": {
                "typeVoieEtablissement": "PL",
                "libelleVoieEtablissement": "DE LA CONCORDE",
                "codePostalEtablissement": "75008",
                "libelleCommuneEtablissement": "PARIS 8",
                "codeCommuneEtablissement": "75108",
                "identifiantAdresseEtablissement": "751087508_B",
            },
        },
    ],
}
