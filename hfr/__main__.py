from hfr.cli.app import main

main()
