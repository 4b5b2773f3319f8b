from ridingtally.interfaces.cli.main import main


main()
