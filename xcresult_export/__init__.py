"""Export Xcode result bundles as Allure 2 results."""
