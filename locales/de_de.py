DE_DE = {
    "common": {
        "welcome": "Willkommen",
        "hello": "Hallo {{name}}",
        "goodbye": "Auf Wiedersehen",
        "yes": "Ja",
        "no": "Nein",
        "save": "Speichern",
        "cancel": "Abbrechen",
        "delete": "Löschen",
        "edit": "Bearbeiten",
        "create": "Erstellen",
        "update": "Aktualisieren",
        "search": "Suchen",
        "loading": "Wird geladen...",
        "error": "Fehler",
        "success": "Erfolgreich",
        "learnMore": "Mehr erfahren",
        "poweredBy": "Bereitgestellt von",
        "with": "mit",
        "theme": "Design",
        "language": "Sprache",
        "show": "Einstellungen anzeigen",
        "hide": "Einstellungen ausblenden",
    },
    "navigation": {
        "home": "Startseite",
        "dashboard": "Dashboard",
        "settings": "Einstellungen",
        "profile": "Profil",
        "logout": "Abmelden",
        "organisation": "Organisation",
        "console": "Konsole",
        "documentation": "Dokumentation",
        "marketingToolkit": "Marketing-Toolkit",
        "sections": {
            "management": "Verwaltung",
            "developer": "Entwickler",
            "resources": "Ressourcen",
        },
    },
    "errors": {
        "notFound": "Nicht gefunden",
        "unauthorized": "Nicht autorisiert",
        "serverError": "Serverfehler",
        "networkError": "Netzwerkfehler",
        "validationError": "Validierungsfehler",
    },
    "validation": {
        "required": "Dieses Feld ist erforderlich",
        "invalidEmail": "Ungültige E-Mail-Adresse",
        "minLength": "Die Mindestlänge beträgt {{min}} Zeichen",
        "maxLength": "Die maximale Länge beträgt {{max}} Zeichen",
    },
    "dashboard": {
        "meta": {
            "title": "ekko Dashboard",
            "description": "Verwalten Sie Ihre Organisation, Integrationen und Klimawirkung",
        },
        "hero": {
            "heading": "Bearbeiten Sie die Dashboard-Seite, um loszulegen.",
            "description": "Suchen Sie einen Einstieg? Besuchen Sie unsere {{templates}} oder das {{learning}}-Center.",
            "templatesLinkText": "Vorlagen",
            "learningLinkText": "Lern",
        },
        "actions": {
            "deployNow": "Jetzt bereitstellen",
            "documentation": "Dokumentation",
        },
        "imageAlt": {
            "nextjsLogo": "Next.js-Logo",
            "vercelLogomark": "Vercel-Logo",
        },
        "pages": {
            "dashboard": {
                "title": "Dashboard",
                "description": "Ein Überblick über die Aktivitäten Ihrer Organisation",
                "cardTitle": "Karte {{number}}",
                "cardDescription": "Platzhalterinhalt für diese Karte",
            },
            "organisation": {
                "title": "Organisation",
                "description": "Verwalten Sie Angaben, Struktur und Benutzer Ihrer Organisation",
                "tabs": {
                    "info": "Informationen",
                    "hierarchy": "Hierarchie",
                    "users": "Benutzer",
                },
                "info": {
                    "basicInformation": "Grundlegende Informationen",
                    "organisationName": "Name der Organisation",
                    "organisationNamePlaceholder": "Namen der Organisation eingeben",
                    "legalName": "Rechtlicher Name",
                    "legalNamePlaceholder": "Rechtlichen Namen eingeben",
                    "billingAddress": "Rechnungsadresse",
                    "streetAddress": "Straße und Hausnummer",
                    "streetAddressPlaceholder": "Straße und Hausnummer eingeben",
                    "city": "Stadt",
                    "cityPlaceholder": "Stadt eingeben",
                    "postalCode": "Postleitzahl",
                    "postalCodePlaceholder": "Postleitzahl eingeben",
                    "country": "Land",
                    "countryPlaceholder": "Land eingeben",
                    "contactInformation": "Kontaktinformationen",
                    "email": "E-Mail",
                    "emailPlaceholder": "E-Mail-Adresse eingeben",
                    "phoneNumber": "Telefonnummer",
                    "phoneNumberPlaceholder": "Telefonnummer eingeben",
                    "saveChanges": "Änderungen speichern",
                },
                "hierarchy": {
                    "organisationStructure": "Organisationsstruktur",
                    "description": "Struktur Ihrer Organisation anzeigen und verwalten",
                    "chartPlaceholder": "Organigramm folgt in Kürze",
                    "departments": "Abteilungen",
                    "departmentsDescription": "Benutzer in Abteilungen und Teams gruppieren",
                },
                "users": {
                    "usersList": "Benutzer",
                    "addUser": "Benutzer hinzufügen",
                    "description": "Personen in Ihrer Organisation einladen und verwalten",
                    "rolesPermissions": "Rollen und Berechtigungen",
                    "rolesDescription": "Legen Sie fest, was jede Rolle sehen und tun kann",
                },
            },
            "console": {
                "title": "Konsole",
                "description": "Entwicklerwerkzeuge für die Integration mit ekko",
                "apiKeys": {
                    "title": "API-Schlüssel",
                    "description": "Schlüssel für API-Aufrufe erstellen und widerrufen",
                },
                "webhooks": {
                    "title": "Webhooks",
                    "description": "Benachrichtigungen erhalten, wenn in Ihrem Konto etwas passiert",
                },
                "logs": {
                    "title": "Protokolle",
                    "description": "Aktuelle Anfragen mit Ihren API-Schlüsseln prüfen",
                },
            },
            "documentation": {
                "title": "Dokumentation",
                "description": "Anleitungen und Referenzen für die Arbeit mit ekko",
                "gettingStarted": {
                    "title": "Erste Schritte",
                    "description": "Konto einrichten und die erste Anfrage senden",
                    "readMore": "Weiterlesen",
                },
                "apiReference": {
                    "title": "API-Referenz",
                    "description": "Endpunkte, Parameter und Antwortformate",
                    "readMore": "Weiterlesen",
                },
                "sdksLibraries": {
                    "title": "SDKs und Bibliotheken",
                    "description": "Checkout- und Post-Purchase-Widgets einbetten",
                    "readMore": "Weiterlesen",
                },
                "tutorials": {
                    "title": "Tutorials",
                    "description": "Schritt-für-Schritt-Anleitungen für gängige Integrationen",
                    "readMore": "Weiterlesen",
                },
            },
            "marketingToolkit": {
                "title": "Marketing-Toolkit",
                "description": "Material, um Ihr Klimaengagement zu bewerben",
                "brandAssets": {
                    "title": "Markenmaterial",
                    "description": "Logos, Farben und Nutzungsrichtlinien",
                    "downloadLogos": "Logos herunterladen",
                    "viewGuidelines": "Richtlinien ansehen",
                },
                "socialMediaTemplates": {
                    "title": "Social-Media-Vorlagen",
                    "description": "Fertige Beiträge, um Ihre Wirkung zu teilen",
                    "browseTemplates": "Vorlagen durchsuchen",
                },
                "emailTemplates": {
                    "title": "E-Mail-Vorlagen",
                    "description": "Informieren Sie Ihre Kunden über die unterstützten Projekte",
                    "viewTemplates": "Vorlagen ansehen",
                },
            },
        },
    },
    "sdks": {
        "meta": {
            "homeTitle": "ekko SDK",
            "checkoutTitle": "Checkout | ekko SDK",
            "postPurchaseTitle": "Nach dem Kauf | ekko SDK",
        },
        "home": {
            "heading": "ekko SDK-Widgets",
            "description": "Vorschau der einbettbaren Widgets",
            "checkoutLink": "Checkout-Widget",
            "postPurchaseLink": "Post-Purchase-Widget",
        },
        "checkout": {
            "title": "Wenig geben. Viel bewegen.",
            "subtitle": "Unterstützen Sie {{projects}} und gleichen Sie den ~{{footprint}} kgCO2e-Fußabdruck dieses Kaufs aus - etwa so viel, wie {{trees}} in {{years}} binden kann!",
            "environmentalProjects": "Umweltprojekte",
            "tree": "1 Baum",
            "year": "1 Jahr",
            "climateAction": "Klimaschutz unterstützen",
            "roundUp": "Aufrunden für mehr Wirkung",
            "thankYou": "Danke! Gemeinsam bewirken wir echte Veränderung.",
            "imageAlt": "Schneebedeckter Berggipfel",
        },
        "postPurchase": {
            "title": "Wenig geben. Viel bewegen.",
            "description": "Unterstützen Sie Klimaprojekte und gleichen Sie den CO2-Fußabdruck dieses Kaufs aus (~{{footprint}} kgCO2e).",
            "findOutMore": "Mehr erfahren",
            "embeddedSdk": "Eingebettetes SDK",
            "imageAlt": "Dichtes Blätterdach eines Waldes von oben",
            "moreInformation": "Weitere Informationen",
        },
    },
}
