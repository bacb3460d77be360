from carsales_scraper.main import main

main()
