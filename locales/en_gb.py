EN_GB = {
    "common": {
        "welcome": "Welcome",
        "hello": "Hello {{name}}",
        "goodbye": "Goodbye",
        "yes": "Yes",
        "no": "No",
        "save": "Save",
        "cancel": "Cancel",
        "delete": "Delete",
        "edit": "Edit",
        "create": "Create",
        "update": "Update",
        "search": "Search",
        "loading": "Loading...",
        "error": "Error",
        "success": "Success",
        "learnMore": "Learn more",
        "poweredBy": "Powered by",
        "with": "with",
        "theme": "Theme",
        "language": "Language",
        "show": "Show settings",
        "hide": "Hide settings",
    },
    "navigation": {
        "home": "Home",
        "dashboard": "Dashboard",
        "settings": "Settings",
        "profile": "Profile",
        "logout": "Logout",
        "organisation": "Organisation",
        "console": "Console",
        "documentation": "Documentation",
        "marketingToolkit": "Marketing Toolkit",
        "sections": {
            "management": "Management",
            "developer": "Developer",
            "resources": "Resources",
        },
    },
    "errors": {
        "notFound": "Not found",
        "unauthorized": "Unauthorised",
        "serverError": "Server error",
        "networkError": "Network error",
        "validationError": "Validation error",
    },
    "validation": {
        "required": "This field is required",
        "invalidEmail": "Invalid email address",
        "minLength": "Minimum length is {{min}} characters",
        "maxLength": "Maximum length is {{max}} characters",
    },
    "dashboard": {
        "meta": {
            "title": "ekko Dashboard",
            "description": "Manage your organisation, integrations and climate impact",
        },
        "hero": {
            "heading": "To get started, edit the dashboard page.",
            "description": "Looking for a starting point? Head over to our {{templates}} or the {{learning}} centre.",
            "templatesLinkText": "Templates",
            "learningLinkText": "Learning",
        },
        "actions": {
            "deployNow": "Deploy now",
            "documentation": "Documentation",
        },
        "imageAlt": {
            "nextjsLogo": "Next.js logo",
            "vercelLogomark": "Vercel logomark",
        },
        "pages": {
            "dashboard": {
                "title": "Dashboard",
                "description": "An overview of your organisation's activity",
                "cardTitle": "Card {{number}}",
                "cardDescription": "Placeholder content for this card",
            },
            "organisation": {
                "title": "Organisation",
                "description": "Manage your organisation details, structure and users",
                "tabs": {
                    "info": "Information",
                    "hierarchy": "Hierarchy",
                    "users": "Users",
                },
                "info": {
                    "basicInformation": "Basic information",
                    "organisationName": "Organisation name",
                    "organisationNamePlaceholder": "Enter organisation name",
                    "legalName": "Legal name",
                    "legalNamePlaceholder": "Enter legal name",
                    "billingAddress": "Billing address",
                    "streetAddress": "Street address",
                    "streetAddressPlaceholder": "Enter street address",
                    "city": "City",
                    "cityPlaceholder": "Enter city",
                    "postalCode": "Postcode",
                    "postalCodePlaceholder": "Enter postcode",
                    "country": "Country",
                    "countryPlaceholder": "Enter country",
                    "contactInformation": "Contact information",
                    "email": "Email",
                    "emailPlaceholder": "Enter email address",
                    "phoneNumber": "Phone number",
                    "phoneNumberPlaceholder": "Enter phone number",
                    "saveChanges": "Save changes",
                },
                "hierarchy": {
                    "organisationStructure": "Organisation structure",
                    "description": "View and manage how your organisation is structured",
                    "chartPlaceholder": "Organisation chart coming soon",
                    "departments": "Departments",
                    "departmentsDescription": "Group users into departments and teams",
                },
                "users": {
                    "usersList": "Users",
                    "addUser": "Add user",
                    "description": "Invite and manage the people in your organisation",
                    "rolesPermissions": "Roles and permissions",
                    "rolesDescription": "Control what each role can see and do",
                },
            },
            "console": {
                "title": "Console",
                "description": "Developer tools for integrating with ekko",
                "apiKeys": {
                    "title": "API keys",
                    "description": "Create and revoke the keys used to call the API",
                },
                "webhooks": {
                    "title": "Webhooks",
                    "description": "Receive notifications when events happen in your account",
                },
                "logs": {
                    "title": "Logs",
                    "description": "Inspect recent requests made with your API keys",
                },
            },
            "documentation": {
                "title": "Documentation",
                "description": "Guides and references for building with ekko",
                "gettingStarted": {
                    "title": "Getting started",
                    "description": "Set up your account and make your first request",
                    "readMore": "Read more",
                },
                "apiReference": {
                    "title": "API reference",
                    "description": "Endpoints, parameters and response formats",
                    "readMore": "Read more",
                },
                "sdksLibraries": {
                    "title": "SDKs and libraries",
                    "description": "Embed the checkout and post-purchase widgets",
                    "readMore": "Read more",
                },
                "tutorials": {
                    "title": "Tutorials",
                    "description": "Step-by-step walkthroughs of common integrations",
                    "readMore": "Read more",
                },
            },
            "marketingToolkit": {
                "title": "Marketing Toolkit",
                "description": "Assets to promote your climate commitment",
                "brandAssets": {
                    "title": "Brand assets",
                    "description": "Logos, colours and usage guidelines",
                    "downloadLogos": "Download logos",
                    "viewGuidelines": "View guidelines",
                },
                "socialMediaTemplates": {
                    "title": "Social media templates",
                    "description": "Ready-made posts to share your impact",
                    "browseTemplates": "Browse templates",
                },
                "emailTemplates": {
                    "title": "Email templates",
                    "description": "Tell your customers about the projects they support",
                    "viewTemplates": "View templates",
                },
            },
        },
    },
    "sdks": {
        "meta": {
            "homeTitle": "ekko SDK",
            "checkoutTitle": "Checkout | ekko SDK",
            "postPurchaseTitle": "Post-Purchase | ekko SDK",
        },
        "home": {
            "heading": "ekko SDK widgets",
            "description": "Preview the embeddable widgets",
            "checkoutLink": "Checkout widget",
            "postPurchaseLink": "Post-purchase widget",
        },
        "checkout": {
            "title": "Give a little. Change a lot.",
            "subtitle": "Support {{projects}} and act on the ~{{footprint}} kgCO2e footprint of this purchase - about what {{trees}} can capture in {{years}}!",
            "environmentalProjects": "environmental projects",
            "tree": "1 tree",
            "year": "1 year",
            "climateAction": "Support climate action",
            "roundUp": "Round up to boost impact",
            "thankYou": "Thank you! Together, we're creating real change.",
            "imageAlt": "Snow-capped mountain peak",
        },
        "postPurchase": {
            "title": "Give a little. Change a lot.",
            "description": "Support climate projects and act on the carbon footprint of this purchase (~{{footprint}} kgCO2e).",
            "findOutMore": "Find out more",
            "embeddedSdk": "Embedded SDK",
            "imageAlt": "Dense forest canopy from above",
            "moreInformation": "More information",
        },
    },
}
