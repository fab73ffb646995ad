from city_density.main import main

main()
