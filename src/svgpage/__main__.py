from svgpage.cli import main

main()
