from natural_numbers.nat_cli import main

raise SystemExit(main())
