from asset_extractor.cli import main

main()
